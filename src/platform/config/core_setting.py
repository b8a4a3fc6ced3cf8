from pathlib import Path
from typing import List, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Touchgrass Catalog'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Logging
    SERVICE_NAME: str = 'catalog-service'
    DEPLOY_ENV: str = 'local_dev'
    LOG_DIR: str = str(_PROJECT_ROOT / 'logs')
    LOG_FILE_PREFIX: str = ''
    LOG_ROTATION: str = '1 hour'
    LOG_RETENTION: str = '7 days'

    # Security (tokens are issued by the external identity provider)
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ALGORITHM: str = 'HS256'
    AUTH_COOKIE_NAME: str = 'access_token'

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

    # PostgreSQL
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'touchgrass'
    POSTGRES_PASSWORD: SecretStr = SecretStr('touchgrass')
    POSTGRES_DB: str = 'touchgrass'
    POSTGRES_PORT: int = 5432

    # Full async URL override, e.g. sqlite+aiosqlite:///./dev.db
    DATABASE_URL: Optional[str] = None

    # Connection pool (ignored for SQLite)
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 1800
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    @property
    def DATABASE_URL_SYNC(self) -> str:
        return self.DATABASE_URL_ASYNC.replace('+asyncpg', '').replace('+aiosqlite', '')

    # Object storage (path-addressed, served back under /{MEDIA_BUCKET})
    MEDIA_ROOT: str = str(_PROJECT_ROOT / 'storage')
    MEDIA_BUCKET: str = 'media'
    MEDIA_PUBLIC_BASE_URL: str = 'http://localhost:8000'
    MEDIA_UPSERT: bool = False

    # Media policy (advertised limit in the organizer forms)
    MEDIA_MAX_FILE_SIZE_BYTES: int = 5_000_000
    MEDIA_ENFORCE_MAX_FILE_SIZE: bool = True

    @property
    def MEDIA_BUCKET_DIR(self) -> Path:
        return Path(self.MEDIA_ROOT) / self.MEDIA_BUCKET


settings = Settings()  # type: ignore
