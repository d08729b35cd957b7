from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Application
    APP_NAME: str = "Clinic Scheduler"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    
    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    
    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value
    
    @property
    def get_log_level(self) -> str:
        """Return the effective log level, DEBUG mode overriding LOG_LEVEL"""
        if self.DEBUG:
            return "DEBUG"
        return self.LOG_LEVEL

# Create settings instance
settings = Settings()
