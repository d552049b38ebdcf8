import os

from pydantic import BaseModel, SecretStr, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class DBSettings(BaseModel):
    name: str = "marketplace"
    user: str = "postgres"
    password: SecretStr = SecretStr("postgres")
    host: str = "localhost"
    port: int = 5435
    echo: bool = False


class MinioSettings(BaseModel):
    host: str = "localhost"
    port: int = 9000
    bucket: str = "course-images"
    access_key: str = "minioadmin"
    secret_key: SecretStr = SecretStr("minioadmin")
    secure: bool = False
    public_url: str | None = None


class StripeSettings(BaseModel):
    secret_key: SecretStr = SecretStr("")
    currency: str = "usd"


class Settings(BaseSettings):
    app_name: str = "Course Marketplace"
    debug: bool = False
    log_level: str = "INFO"
    db_settings: DBSettings = Field(default_factory=DBSettings)
    minio_settings: MinioSettings = Field(default_factory=MinioSettings)
    stripe_settings: StripeSettings = Field(default_factory=StripeSettings)
    secret_key: str
    algorithm: str = "HS256"

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        extra="forbid",
        env_nested_delimiter="__"
    )
