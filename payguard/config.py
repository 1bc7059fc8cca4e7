from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # API Configuration
    APP_NAME: str = "PayGuard"
    VERSION: str = "1.0.0"
    API_PREFIX: str = "/api"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Analysis Settings
    # Cosmetic latency before a scan resolves, so clients can show a loading state
    ANALYSIS_DELAY_SECONDS: float = 0.2
    MAX_CONTENT_LENGTH: int = 10000

settings = Settings()
