from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str = Field(..., alias="DATABASE_URL")

    jwt_secret_key: str = Field(..., alias="JWT_SECRET_KEY")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(60, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    log_level: str = Field("INFO", alias="LOG_LEVEL")

    # Synthetic login identifiers are <username>@<login_domain>
    login_domain: str = Field("daycare.local", alias="LOGIN_DOMAIN")
    # Zone used by the nightly reset and the month-end checklist job
    tenant_timezone: str = Field("America/Denver", alias="TENANT_TIMEZONE")
    photo_retention_days: int = Field(14, alias="PHOTO_RETENTION_DAYS")
    trial_days: int = Field(30, alias="TRIAL_DAYS")
    # Per-commit mutation ceiling for batched jobs
    batch_size: int = Field(500, alias="BATCH_SIZE")

    storage_root: str = Field("./storage", alias="STORAGE_ROOT")
    push_endpoint: Optional[str] = Field(None, alias="PUSH_ENDPOINT")
    push_server_key: Optional[str] = Field(None, alias="PUSH_SERVER_KEY")

    # Shared by the scheduler and the event relay when calling /jobs and /triggers
    platform_secret: Optional[str] = Field(None, alias="PLATFORM_SECRET")
    super_admin_uid: Optional[str] = Field(None, alias="SUPER_ADMIN_UID")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
