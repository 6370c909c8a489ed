# ecomm_service/repos/order_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from ecomm_service.models import Order


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def save(self, order: Order) -> Order:
        self.db.add(order)
        self.db.flush()
        return order

    def find_all(self) -> List[Order]:
        return list(self.db.execute(select(Order).order_by(Order.order_id)).scalars())
