from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "local"
    APP_NAME: str = "Tourbook"
    LOG_LEVEL: str = "INFO"
    # Comma-separated origins for CORS. If empty, uses localhost defaults.
    CORS_ORIGINS: str = ""

    SECRET_KEY: str
    SESSION_COOKIE_NAME: str = "session"
    SESSION_TTL_MINUTES: int = 60
    SESSION_COOKIE_SECURE: bool = False

    DATABASE_URL: str

    @field_validator("DATABASE_URL", mode="after")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        """Heroku-style hosts give postgres://; SQLAlchemy expects postgresql+psycopg2://."""
        if v and v.startswith("postgres://"):
            return "postgresql+psycopg2://" + v[11:]
        return v

    DB_POOL_SIZE: int = 10
    DB_POOL_TIMEOUT: int = 30  # seconds a request queues for a pooled connection
    DB_WAIT_TIMEOUT: int = 60
    DB_RETRY_DELAY: int = 2

    # Destinations outside this country are flagged international
    HOME_COUNTRY: str = "India"

    PORT: int = 8000


settings = Settings()
