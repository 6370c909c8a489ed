# ecomm_service/api/routers/products.py
import logging
from typing import List

from fastapi import APIRouter, Depends, Header, HTTPException, Query, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ecomm_service.db import get_db
from ecomm_service.schemas import ProductCreate, ProductResponse, ProductUpdate
from ecomm_service.services.product_service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


def get_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


@router.get(
    "",
    response_model=List[ProductResponse],
    summary="Retrieve a list of all products",
)
def get_all_products(svc: ProductService = Depends(get_service)):
    return svc.get_all_products()


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new product",
)
def add_product(product: ProductCreate, svc: ProductService = Depends(get_service)):
    logger.info(f"Product Catalog: Creating product: {product.name}")
    try:
        return svc.add_product(product)
    except Exception as e:
        logger.error(f"Product Catalog: Error creating product: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not create product.",
        )


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    summary="Retrieve a single product by ID",
)
def get_product(product_id: int, svc: ProductService = Depends(get_service)):
    # ProductNotFoundError is turned into a 404 by the app-level handler
    return svc.get_product_by_id(product_id)


@router.put(
    "",
    response_model=ProductResponse,
    summary="Replace a product with the posted body",
)
def update_product(
    product: ProductUpdate,
    product_id: int = Query(
        ..., alias="id", description="ID of the product that must already exist."
    ),
    token: str = Header(..., description="Caller token; read but not verified."),
    svc: ProductService = Depends(get_service),
):
    """
    Saves the posted product when the product named by `id` exists.

    The body is saved under its own id, not the query id.
    """
    logger.info(
        f"Product Catalog: Update requested for product {product_id} (token header present: {bool(token)})"
    )
    if svc.find_product(product_id) is None:
        logger.warning(
            f"Product Catalog: Attempted to update non-existent product with ID {product_id}."
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Product {product_id} does not exist.",
        )
    try:
        return svc.update_product(product)
    except IntegrityError as e:
        logger.error(f"Product Catalog: Integrity error updating product {product_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Could not update product.",
        )
    except Exception as e:
        logger.error(
            f"Product Catalog: Error updating product {product_id}: {e}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Could not update product.",
        )


@router.delete(
    "/{product_id}",
    response_class=PlainTextResponse,
    summary="Delete a product and its order lines",
)
def delete_product(product_id: int, svc: ProductService = Depends(get_service)):
    logger.info(f"Product Catalog: Attempting to delete product with ID: {product_id}")
    svc.delete_product(product_id)
    return PlainTextResponse(f"Product {product_id} successfully Deleted")
