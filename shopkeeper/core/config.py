# shopkeeper/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App
    ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str

    # Tenant used when a request carries no X-Shop-Id header
    DEFAULT_SHOP_ID: int | None = None

    # Stock
    ALLOW_NEGATIVE_STOCK: bool = True

    # Rate limiting
    ORDER_RATE_LIMIT: str = "30/minute"

    # Frontend
    CORS_ORIGINS: list[str] = [
        "http://127.0.0.1:5173",
        "http://localhost:5173",
    ]

    # UPI
    UPI_CURRENCY: str = "INR"
    QR_SERVICE_URL: str = "https://api.qrserver.com/v1/create-qr-code/?size=300x300&data={data}"
    QR_SERVICE_CHECK: bool = False
    QR_SERVICE_TIMEOUT: int = 5

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",
    )


settings = Settings()
