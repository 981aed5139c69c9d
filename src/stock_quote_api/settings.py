"""Process-wide configuration loaded from the environment (and `.env`)."""
from functools import lru_cache
from urllib.parse import quote

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Stock Quote API"
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str | None = None
    DB_DRIVER: str = "postgresql+psycopg"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "stock_app"
    DB_USERNAME: str = "stock_app"
    DB_PASSWORD: str = "stock_app"
    SQL_ECHO: bool = False

    # Seeded account, created only when the users table is empty
    DEFAULT_USERNAME: str = "user@example.com"
    DEFAULT_PASSWORD: str = "user123"

    # Auth
    JWT_SECRET: str = "your-secret-key"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION: int = 3600  # seconds

    # Quote provider: stooq | yfinance
    STOCK_PROVIDER: str = "stooq"
    STOCK_API_URL: str = "https://stooq.com/q/l/"
    STOCK_API_TIMEOUT: float = 10.0

    # Mailer (used by the consumer process)
    MAILER_ENABLED: bool = False
    MAILER_DSN: str | None = None
    MAILER_HOST: str = "smtp.mailtrap.io"
    MAILER_PORT: int = 465
    MAILER_USERNAME: str = "test"
    MAILER_PASSWORD: str = "test"
    MAILER_FROM: str = "stock-api@example.com"
    MAILER_FROM_NAME: str = "Stock API"
    MAILER_TIMEOUT: float = 10.0

    # Message broker
    RMQ_ENABLED: bool = False
    RMQ_HOST: str = "localhost"
    RMQ_PORT: int = 5672
    RMQ_USERNAME: str = "guest"
    RMQ_PASSWORD: str = "guest"
    RMQ_VHOST: str = "/"
    RMQ_TIMEOUT: float = 4.0
    BROKER_URL: str | None = None
    EMAIL_QUEUE: str = "email_queue"

    # Delivery failure policy; 0 retries keeps at-most-once delivery
    NOTIFY_MAX_RETRIES: int = 0
    NOTIFY_RETRY_DELAY: int = 30  # seconds
    NOTIFY_DEAD_LETTER_QUEUE: str | None = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"{self.DB_DRIVER}://{quote(self.DB_USERNAME, safe='')}:"
            f"{quote(self.DB_PASSWORD, safe='')}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def broker_url(self) -> str:
        if self.BROKER_URL:
            return self.BROKER_URL
        return (
            f"amqp://{quote(self.RMQ_USERNAME, safe='')}:{quote(self.RMQ_PASSWORD, safe='')}"
            f"@{self.RMQ_HOST}:{self.RMQ_PORT}/{quote(self.RMQ_VHOST, safe='')}"
        )

    @property
    def mailer_dsn(self) -> str:
        """SMTP DSN; MAILER_DSN wins over the discrete MAILER_* parts."""
        if self.MAILER_DSN:
            return self.MAILER_DSN
        return (
            f"smtp://{quote(self.MAILER_USERNAME, safe='')}:{quote(self.MAILER_PASSWORD, safe='')}"
            f"@{self.MAILER_HOST}:{self.MAILER_PORT}"
        )


@lru_cache
def get_settings() -> Settings:
    """Return the settings instance shared by the process."""
    return Settings()
