from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # JWT
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 720

    # Database
    DATABASE_URL: str
    DATABASE_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    # event
    ADMIN_STUDENT_IDS: List[str] = []
    MAX_PARTICIPANT_NUMBER: int = 6
    SEED_TIME_SLOTS: bool = True

    class Config:
        env_file = ".env"


settings = Settings()
