from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from typing import Optional

load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./tripplanner.db"
    DB_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    # OpenAI-compatible completion endpoint
    OPENAI_API_KEY: Optional[str] = None
    BASE_URL: Optional[str] = None
    AI_MODEL: str = "gpt-3.5-turbo"
    AI_PREMIUM_MODEL: str = "gpt-4"
    AI_TEMPERATURE: float = 0.7
    AI_MAX_TOKENS: int = 3000

    PROJECT_NAME: str = "Trip Planner API"
    PROJECT_VERSION: str = "1.0.0"
    PROJECT_DESCRIPTION: str = "Generates day-by-day trip itineraries and stores them as structured activities"

    class Config:
        env_file = ".env"


settings = Settings()
