# ecomm_service/exceptions.py


class EcommServiceError(Exception):
    """Base class for domain errors raised by the service layer."""


class ProductNotFoundError(EcommServiceError):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")
