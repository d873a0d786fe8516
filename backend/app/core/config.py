from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    ENV: str = "development"
    DATABASE_URL: str = "sqlite:///./pharmaplus.db"
    
    # CORS
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8080"
    
    # Ключ, под которым хранится вся коллекция акций
    PROMOTIONS_STORAGE_KEY: str = "pharmaplus_promotions"
    
    # Искусственная задержка "сети" при создании/редактировании
    SIMULATED_LATENCY_MS: int = 1000
    
    LOG_LEVEL: str = "INFO"
    
    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]
    
    @property
    def simulated_latency_seconds(self) -> float:
        return max(self.SIMULATED_LATENCY_MS, 0) / 1000
    
    class Config:
        env_file = ".env"


settings = Settings()
