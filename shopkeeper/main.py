# Main application file

import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from shopkeeper.core.rate_limiter import limiter
from shopkeeper.core.config import settings
from shopkeeper.routers import (
    shops,
    categories,
    products,
    customers,
    orders,
    transactions,
    reports,
    upi,
)


# LOGGING CONFIGURATION

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s | %(levelname)s | %(message)s",
)

logger = logging.getLogger("shopkeeper")


# APP INIT

app = FastAPI(
    title="Shopkeeper API",
    description="Inventory, customers, orders and UPI payment links for small retail shops",
    version="1.0.0",
    debug=settings.DEBUG,
)


# CORS

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "X-Shop-Id"],
)


# RATE LIMITING

app.state.limiter = limiter
app.add_exception_handler(
    RateLimitExceeded,
    _rate_limit_exceeded_handler
)


# VALIDATION ERRORS -> 400

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request data for {request.method} {request.url.path}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid request data",
            "details": jsonable_encoder(exc.errors()),
        },
    )


# REQUEST LOGGING MIDDLEWARE

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    duration = round((time.time() - start_time) * 1000, 2)

    logger.info(
        f"{request.method} {request.url.path} "
        f"Status: {response.status_code} "
        f"Time: {duration}ms"
    )

    return response


# ROUTERS

app.include_router(shops.router)
app.include_router(categories.router)
app.include_router(products.router)
app.include_router(customers.router)
app.include_router(orders.router)
app.include_router(transactions.router)
app.include_router(reports.router)
app.include_router(upi.router)


# ROOT

@app.get("/")
def root():
    logger.info("Health check endpoint called")
    return {"message": "Shopkeeper API is running"}
