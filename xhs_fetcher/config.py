from pydantic_settings import BaseSettings
from typing import List, Optional
import os

class Settings(BaseSettings):
    READER_BASE_URL: str = "https://r.jina.ai"
    READER_API_KEY: Optional[str] = None
    FETCH_TIMEOUT: float = 15.0  # seconds, wall-clock for the whole fetch
    ALLOWED_ORIGINS: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

settings = Settings(_env_file=os.getenv("ENV_FILE", ".env"), _env_file_encoding="utf-8")
