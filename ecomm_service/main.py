# ecomm_service/main.py

import logging
import os
import sys
import time

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError

from . import models  # noqa: F401  registers tables on Base.metadata
from .api.routers import orders, products
from .db import Base, engine
from .exceptions import ProductNotFoundError

# --- Standard Logging Configuration ---
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

# Suppress noisy logs from third-party libraries for cleaner output
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)

DB_STARTUP_MAX_RETRIES = int(os.getenv("DB_STARTUP_MAX_RETRIES", "10"))
DB_STARTUP_RETRY_DELAY_SECONDS = int(os.getenv("DB_STARTUP_RETRY_DELAY_SECONDS", "5"))


def create_app() -> FastAPI:
    app = FastAPI(
        title="Ecomm Service API",
        description="Products, orders and order lines for the mini e-commerce app.",
        version="1.0.0",
    )

    # Enable CORS (for frontend dev/testing)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Use specific origins in production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(products.router)
    app.include_router(orders.router)
    return app


app = create_app()


# --- FastAPI Event Handlers ---
@app.on_event("startup")
async def startup_event():
    for i in range(DB_STARTUP_MAX_RETRIES):
        try:
            logger.info(
                f"Ecomm Service: Attempting to connect to the database and create tables (attempt {i+1}/{DB_STARTUP_MAX_RETRIES})..."
            )
            Base.metadata.create_all(bind=engine)
            logger.info(
                "Ecomm Service: Successfully connected to the database and ensured tables exist."
            )
            break
        except OperationalError as e:
            logger.warning(f"Ecomm Service: Failed to connect to the database: {e}")
            if i < DB_STARTUP_MAX_RETRIES - 1:
                logger.info(
                    f"Ecomm Service: Retrying in {DB_STARTUP_RETRY_DELAY_SECONDS} seconds..."
                )
                time.sleep(DB_STARTUP_RETRY_DELAY_SECONDS)
            else:
                logger.critical(
                    f"Ecomm Service: Failed to connect to the database after {DB_STARTUP_MAX_RETRIES} attempts. Exiting application."
                )
                sys.exit(1)
        except Exception as e:
            logger.critical(
                f"Ecomm Service: An unexpected error occurred during database startup: {e}",
                exc_info=True,
            )
            sys.exit(1)


@app.exception_handler(ProductNotFoundError)
async def product_not_found_handler(request: Request, exc: ProductNotFoundError):
    logger.warning(f"Ecomm Service: {exc} ({request.method} {request.url.path})")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
    )


# --- Root Endpoint ---
@app.get("/", status_code=status.HTTP_200_OK, summary="Root endpoint")
async def read_root():
    return {"message": "Welcome to the Ecomm Service!"}


# --- Health Check Endpoint ---
@app.get("/health", status_code=status.HTTP_200_OK, summary="Health check endpoint")
async def health_check():
    return {"status": "ok", "service": "ecomm-service"}


def run():
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    run()
