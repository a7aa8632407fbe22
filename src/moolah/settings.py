from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    horizon_days: int = Field(default=365, ge=0, alias="MOOLAH_HORIZON_DAYS")
    log_level: str = Field(default="INFO", alias="MOOLAH_LOG_LEVEL")
    report_dir: str = Field(default="reports", alias="MOOLAH_REPORT_DIR")


settings = Settings()
