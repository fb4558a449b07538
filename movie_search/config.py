from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import ConfigDict


class Settings(BaseSettings):
    OMDB_API_KEY: Optional[str] = None
    OMDB_HOST: str = 'omdbapi.com'
    OMDB_DATA_SUB_HOST: str = 'www'
    OMDB_TIMEOUT: float = 10.0
    LOG_LEVEL: str = 'INFO'

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore"
    )


settings = Settings()
