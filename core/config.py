from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(True, alias="LOG_JSON")

    # Result cache
    redis_url: str = Field("redis://localhost:6379/0", alias="REDIS_URL")
    metrics_cache_ttl_sec: int = Field(300, alias="METRICS_CACHE_TTL_SEC", gt=0)
    metrics_cache_prefix: str = Field("metrics", alias="METRICS_CACHE_PREFIX")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
