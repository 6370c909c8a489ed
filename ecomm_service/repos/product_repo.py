# ecomm_service/repos/product_repo.py
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from ecomm_service.models import Product


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def save(self, product: Product) -> Product:
        # merge: insert when id is None or unknown, overwrite otherwise
        saved = self.db.merge(product)
        self.db.flush()
        return saved

    def find_all(self) -> List[Product]:
        return list(self.db.execute(select(Product).order_by(Product.id)).scalars())

    def find_by_id(self, product_id: int) -> Optional[Product]:
        return self.db.get(Product, product_id)

    def delete(self, product: Product) -> None:
        self.db.delete(product)
        self.db.flush()
