# ecomm_service/api/routers/orders.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ecomm_service.db import get_db
from ecomm_service.schemas import OrderCreate, OrderResponse
from ecomm_service.services.order_service import OrderService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session = Depends(get_db)) -> OrderService:
    return OrderService(db)


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an order with its lines",
)
def add_order(order: OrderCreate, svc: OrderService = Depends(get_service)):
    logger.info(
        f"Orders: Creating order with {len(order.details)} lines for '{order.ship_addr}'"
    )
    try:
        return svc.save_order(order)
    except IntegrityError as e:
        logger.warning(f"Orders: Order rejected by database constraints: {e.orig}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Order references a product that does not exist.",
        )
    except Exception as e:
        logger.error(f"Orders: Error creating order: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not create order.",
        )


@router.get(
    "",
    response_model=List[OrderResponse],
    summary="Retrieve all orders with their lines",
)
def get_all_orders(svc: OrderService = Depends(get_service)):
    return svc.get_all_orders()
