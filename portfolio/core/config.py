from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # Database Configuration - supports either SQLite or PostgreSQL
    SQLITE_DATABASE_URL: Optional[str] = None

    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    POSTGRES_HOST: Optional[str] = None
    POSTGRES_PORT: Optional[int] = None

    @property
    def DATABASE_URL(self) -> str:
        if self.SQLITE_DATABASE_URL:
            return self.SQLITE_DATABASE_URL
        elif all([self.POSTGRES_USER, self.POSTGRES_PASSWORD, self.POSTGRES_DB, self.POSTGRES_HOST, self.POSTGRES_PORT]):
            return f"postgresql+psycopg2://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        else:
            raise ValueError("Database configuration is missing. Please set either SQLITE_DATABASE_URL or all POSTGRES_* variables in your .env file.")

    # Object storage (any S3-compatible endpoint: MinIO, R2, S3)
    STORAGE_ENDPOINT: str = "localhost:9000"
    STORAGE_ACCESS_KEY: str = "minioadmin"
    STORAGE_SECRET_KEY: str = "minioadmin"
    STORAGE_BUCKET: str = "portfolio-media"
    STORAGE_REGION: Optional[str] = None
    STORAGE_SECURE: bool = False
    STORAGE_PUBLIC_URL: str = "http://localhost:9000/portfolio-media"  # Base URL the bucket is served from
    PRESIGNED_URL_EXPIRE_SECONDS: int = 60 * 60
    STORAGE_DELETE_MAX_ATTEMPTS: int = 3
    STORAGE_DELETE_BACKOFF_SECONDS: float = 0.5

    # JWT Authentication
    SECRET_KEY: str = "a_very_secret_key_that_should_be_changed"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 12

    # Contact form email (Resend)
    RESEND_API_KEY: Optional[str] = None
    RESEND_API_URL: str = "https://api.resend.com/emails"
    EMAIL_FROM: str = "onboarding@resend.dev"
    EMAIL_TO: str = "your-email@example.com"
    EMAIL_TIMEOUT_SECONDS: float = 10.0

    # API Configuration
    API_PREFIX: str = "/api"
    CORS_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = 'utf-8'
        extra = 'ignore'

settings = Settings()
