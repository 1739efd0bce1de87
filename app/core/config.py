from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Car Wash Dashboard"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str = ""  # "memory", "json", "firestore"; empty picks by ENV
    DATA_DIR: str = "./data/tenants"

    FIREBASE_CREDENTIALS_PATH: str | None = None
    FIREBASE_PROJECT_ID: str | None = None

    SEED_DEFAULT_SERVICES: bool = True
    LOW_STOCK_THRESHOLD: int = 10

    DEFAULT_CURRENCY_SYMBOL: str = "SAR"
    DEFAULT_THEME: str = "light"


settings = Settings()
