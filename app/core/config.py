# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Centralised settings — read from env vars once."""
import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    SERVICE_NAME: str = "est-api"
    SITE_SERVICE_NAME: str = "est-website"
    SERVICE_VERSION: str = "1.0.0"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Backend
    PORT: int = int(os.getenv("PORT", "5000"))
    MONGO_URI: str = os.getenv("MONGO_URI", "mongodb://localhost:27017/engineeringstudents")
    MONGO_DB_NAME: str = os.getenv("MONGO_DB_NAME", "engineeringstudents")
    MONGO_TIMEOUT_MS: int = int(os.getenv("MONGO_TIMEOUT_MS", "2000"))

    # Website
    SITE_PORT: int = int(os.getenv("SITE_PORT", "3000"))
    API_URL: str = os.getenv("API_URL", os.getenv("REACT_APP_API_URL", "http://localhost:5000")).rstrip("/")
    AUTH_TIMEOUT: float = float(os.getenv("AUTH_TIMEOUT", "5.0"))

    # Persistent client storage
    TOKEN_KEY: str = "est_token"
    MEMBER_KEY: str = "est_member"
    COOKIE_SECURE: bool = os.getenv("COOKIE_SECURE", "false").lower() in ("1", "true", "yes")
    COOKIE_MAX_AGE: int = int(os.getenv("COOKIE_MAX_AGE", str(60 * 60 * 24 * 30)))

    _raw_origins: str = os.getenv("CORS_ORIGINS", "*")
    CORS_ORIGINS: list = [o.strip() for o in _raw_origins.split(",") if o.strip()]


settings = Settings()
