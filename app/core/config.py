import json

from pydantic_settings import BaseSettings

from app.core.constants import AnalyticsRange


class Settings(BaseSettings):
    DATABASE_URL: str

    REDIS_URL: str = "redis://redis:6379/0"

    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7

    EMAIL_BACKEND: str = "console"
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 587
    SMTP_USERNAME: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_FROM_EMAIL: str = "noreply@eventhub.local"
    SMTP_FROM_NAME: str = "EventHub"

    FRONTEND_URL: str = "http://localhost:3000"

    PASSWORD_RESET_TOKEN_EXPIRE_HOURS: int = 24

    BACKEND_CORS_ORIGINS: str = '["http://localhost:3000","http://localhost:3001"]'

    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "EventHub Ticketing API"
    DEBUG: bool = False

    RATE_LIMIT_ENABLED: bool = True

    # S3-compatible storage (LocalStack in development)
    S3_BUCKET_NAME: str = "event-images"
    S3_REGION: str = "us-east-1"
    S3_ENDPOINT_URL: str = "http://localhost:4566"
    S3_ACCESS_KEY_ID: str = "test"
    S3_SECRET_ACCESS_KEY: str = "test"
    S3_PUBLIC_URL: str = ""  # e.g. https://cdn.example.com
    UPLOAD_URL_EXPIRE_SECONDS: int = 3600
    DEFAULT_EVENT_IMAGE: str = "https://images.unsplash.com/photo-1501281668745-f6f2612e4e71?w=800"

    # Reporting
    ANALYTICS_DEFAULT_RANGE: AnalyticsRange = "30d"
    TOP_EVENTS_LIMIT: int = 5
    EVENT_STATS_LIMIT: int = 4

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        if isinstance(self.BACKEND_CORS_ORIGINS, str):
            try:
                parsed: list[str] = json.loads(self.BACKEND_CORS_ORIGINS)
                return parsed
            except json.JSONDecodeError:
                return ["http://localhost:3000"]
        return self.BACKEND_CORS_ORIGINS


settings = Settings()
