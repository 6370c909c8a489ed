# ecomm_service/services/order_service.py
import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy.orm import Session

from ecomm_service.db import transactional
from ecomm_service.models import Order, OrderDetail
from ecomm_service.repos.order_repo import OrderRepo
from ecomm_service.schemas import OrderCreate

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepo(db)

    def save_order(self, request: OrderCreate) -> Order:
        """
        Persists an order and all of its lines in a single transaction.

        The order date is always the server's current time. A line pointing
        at a missing product fails the foreign key and nothing is written.
        """
        order = Order(
            ship_addr=request.ship_addr,
            order_date=utcnow(),
            order_details=[
                OrderDetail(
                    product_id=line.product_id,
                    quantity=line.quantity,
                    discount=line.discount,
                )
                for line in request.details
            ],
        )
        with transactional(self.db):
            order = self.repo.save(order)
        self.db.refresh(order)
        logger.info(
            f"Orders: Order {order.order_id} saved with {len(order.order_details)} lines."
        )
        return order

    def get_all_orders(self) -> List[Order]:
        orders = self.repo.find_all()
        logger.info(f"Orders: Retrieved {len(orders)} orders.")
        return orders
