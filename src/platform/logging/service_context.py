import os
from functools import lru_cache

from src.platform.config.core_setting import settings


@lru_cache(maxsize=1)
def get_service_context() -> str:
    """`catalog-service@prod:3f2a9c1d0b7e`, or the PID when no container hostname is set."""
    instance = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())
    return f'{settings.SERVICE_NAME}@{settings.DEPLOY_ENV}:{instance}'
