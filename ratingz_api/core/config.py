# ratingz_api/core/config.py
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "ratingz_service"
    env: str = Field(default="local")
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    mongo_dsn: str = Field(
        default="mongodb://mongo:27017/ratingz",
        alias="MONGO_DSN"
    )
    mongo_db: str = "ratingz"

    # пара логин/пароль админки (бывший хардкод в клиенте)
    admin_username: str = Field(default="admin", alias="ADMIN_USERNAME")
    admin_password: str = Field(default="change-me", alias="ADMIN_PASSWORD")
    admin_session_ttl_min: int = Field(default=120,
                                       alias="ADMIN_SESSION_TTL_MIN")

    # публичный сервис определения IP; пусто = не ходим наружу
    ip_lookup_url: str = Field(default="https://api.ipify.org?format=json",
                               alias="IP_LOOKUP_URL")
    ip_lookup_timeout: float = Field(default=2.0, alias="IP_LOOKUP_TIMEOUT")

    top_rated_min_ratings: int = 3

    sentry_dsn: str = Field(default="", alias="SENTRY_DSN")
    sentry_test_enabled: bool = Field(default=False,
                                      alias="SENTRY_TEST_ENABLED")
    # Pydantic v2: модель конфигурации
    model_config = SettingsConfigDict(env_file="infra/.env", extra="ignore")


settings = Settings()
