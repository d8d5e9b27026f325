from pathlib import Path
from typing import List, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.platform.constant.path import DATA_DIR


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Concert Ticket Store'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = []  # add your frontend URL here

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # Storage
    STORAGE_BACKEND: Literal['sqlite', 'memory'] = 'sqlite'
    DATABASE_URL: str = f'sqlite:///{DATA_DIR / "concert_ticket.sqlite3"}'
    DB_ECHO: bool = False

    # Log file sink (only used when DEBUG is on)
    LOG_ROTATION: str = '1 hour'
    LOG_RETENTION: str = '7 days'


settings = Settings()  # type: ignore
