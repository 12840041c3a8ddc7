from pydantic_settings import BaseSettings, SettingsConfigDict

import os

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Aguli TV REST backend, e.g. https://api.aguli.tv
    api_url: str = os.getenv("AGULI_API_URL", "http://localhost:3000")
    saas_api_key: str | None = os.getenv("SAAS_API_KEY")
    request_timeout: float = 30.0

    google_client_id: str | None = os.getenv("GOOGLE_CLIENT_ID")

    secret_key: str = os.getenv("JWT_SECRET", "change-me-in-production-for-jwt")
    session_days: int = 7
    cookie_secure: bool = True

    timezone: str = "Asia/Kolkata"

    max_explore_images: int = 5
    explore_page_size: int = 12
    compose_session_ttl: int = 60 * 60

    environment: str = os.getenv("ENVIRONMENT", "local")

settings = Settings()
