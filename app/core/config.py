"""
Application Configuration
All settings loaded from environment variables
"""
from pydantic import BaseModel
import os


class Settings(BaseModel):
    # ==================== Application ====================
    APP_NAME: str = os.getenv("APP_NAME", "SkillBench OTP Backend")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", os.getenv("NODE_ENV", "development"))

    # ==================== 2Factor ====================
    TWOFACTOR_API_KEY: str = os.getenv("TWOFACTOR_API_KEY", "")
    TWOFACTOR_API_URL: str = os.getenv("TWOFACTOR_API_URL", "https://2factor.in/API/V1")

    # ==================== OTP ====================
    OTP_COUNTRY_CODE: str = os.getenv("OTP_COUNTRY_CODE", "+91")
    OTP_REQUEST_TIMEOUT: int = int(os.getenv("OTP_REQUEST_TIMEOUT", "10"))  # seconds

    # ==================== CORS ====================
    ALLOWED_ORIGINS: str = os.getenv("ALLOWED_ORIGINS", "*")

    # ==================== Logging ====================
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info")
    LOG_FILE: str = os.getenv("LOG_FILE", "logs/app.log")
    LOG_MAX_SIZE: int = int(os.getenv("LOG_MAX_SIZE", "10485760"))  # 10MB
    LOG_BACKUP_COUNT: int = int(os.getenv("LOG_BACKUP_COUNT", "5"))

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    @property
    def cors_origins(self) -> list[str]:
        if self.ALLOWED_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


settings = Settings()
