from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "betaalservice"
    version: str = "0.1.0"
    DEBUG: bool = False
    APP_DOMAIN: str = "example.com"
    APP_DATABASE_DSN: str = "sqlite:////tmp/betaalservice.db"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    # Payment providers
    mollie_api_url: str = "https://api.mollie.com/v2"
    sumup_api_url: str = "https://api.sumup.com/v0.1"
    payment_provider_timeout: float = 30.0

    # Where the hosted payment page sends the customer back to
    payment_redirect_url: str = "https://example.com/payments/return"


settings = Settings()
