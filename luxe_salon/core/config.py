from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str = "json"
    DATA_FILE: str = "./data/services.json"
    PUBLIC_DIR: str = "./public"
    CATALOG_FILE: str = "./public/services.json"

    BUSINESS_NAME: str = "Luxe Salon"
    BOOKING_PHONE: str = "+91 1234567890"
    DEFAULT_SERVICE_IMAGE: str = "images/default.jpg"

    CLIENT_BASE_URL: str = "http://127.0.0.1:3000"
    MOBILE_BREAKPOINT: int = 992

    CORS_ORIGINS: list[str] = ["*"]
    HOST: str = "127.0.0.1"
    PORT: int = 3000


settings = Settings()
