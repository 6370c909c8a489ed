from ecomm_service.repos.order_repo import OrderRepo
from ecomm_service.repos.product_repo import ProductRepo

__all__ = ["OrderRepo", "ProductRepo"]
