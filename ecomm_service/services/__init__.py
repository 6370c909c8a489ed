from ecomm_service.services.order_service import OrderService
from ecomm_service.services.product_service import ProductService

__all__ = ["OrderService", "ProductService"]
