from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="FSGATEWAY_", extra="ignore"
    )

    root_dir: str = "."
    host: str = "0.0.0.0"
    port: int = 3000
    app_version: str = "0.1.0"
    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "info"


settings = Settings()
