from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    ENVIRONMENT: str = "development"  # "development" or "production"

    @property
    def is_production(self):
        return self.ENVIRONMENT == "production"

    ADMIN_API_KEY: str
    GOOGLE_MAPS_API_KEY: Optional[str] = None
    # Browser-side map token handed out by /api/pitches/map-token
    MAPS_PUBLIC_TOKEN: Optional[str] = None
    GEOCODING_REGION: str = "GB"

    CORS_ORIGINS: List[str] = ["http://localhost:5173", "https://app.touchline.club"]

    IMPORT_MAX_FILE_BYTES: int = 5 * 1024 * 1024
    IMPORT_SAMPLE_ROWS: int = 5

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
