# ecomm_service/services/product_service.py
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ecomm_service.db import transactional
from ecomm_service.exceptions import ProductNotFoundError
from ecomm_service.models import Product
from ecomm_service.repos.product_repo import ProductRepo
from ecomm_service.schemas import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


class ProductService:
    """
    Product catalog use cases. Each write runs in its own transaction.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepo(db)

    def add_product(self, request: ProductCreate) -> Product:
        product = Product(
            id=None, name=request.name, price=request.price, color=request.color
        )
        with transactional(self.db):
            product = self.repo.save(product)
        self.db.refresh(product)
        logger.info(
            f"Product Catalog: Product '{product.name}' (ID: {product.id}) created."
        )
        return product

    def get_all_products(self) -> List[Product]:
        products = self.repo.find_all()
        logger.info(f"Product Catalog: Retrieved {len(products)} products.")
        return products

    def find_product(self, product_id: int) -> Optional[Product]:
        return self.repo.find_by_id(product_id)

    def get_product_by_id(self, product_id: int) -> Product:
        product = self.find_product(product_id)
        if product is None:
            logger.warning(f"Product Catalog: Product with ID {product_id} not found.")
            raise ProductNotFoundError(product_id)
        return product

    def update_product(self, payload: ProductUpdate) -> Product:
        """
        Saves the posted entity as-is, keyed by its own id.

        There is no version check: concurrent updates to the same product
        overwrite each other and the last write wins. An id that names no
        existing row is dropped and the database assigns a fresh one.
        """
        product_id = payload.id
        if product_id is not None and self.repo.find_by_id(product_id) is None:
            logger.info(
                f"Product Catalog: Body id {product_id} is unknown, inserting with a generated id."
            )
            product_id = None
        product = Product(
            id=product_id, name=payload.name, price=payload.price, color=payload.color
        )
        with transactional(self.db):
            product = self.repo.save(product)
        self.db.refresh(product)
        logger.info(f"Product Catalog: Product {product.id} saved by update.")
        return product

    def delete_product(self, product_id: int) -> None:
        product = self.get_product_by_id(product_id)
        line_count = len(product.order_details)
        with transactional(self.db):
            self.repo.delete(product)
        logger.info(
            f"Product Catalog: Product {product_id} deleted together with {line_count} order lines."
        )
