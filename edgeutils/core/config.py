import logging
import os
from dataclasses import dataclass
from typing import List, Union

from dotenv import load_dotenv

from .sequences import array_merge
from .sizes import iec_to_num


load_dotenv()

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Sizes are IEC strings (``10M``, ``512Ki``) and are parsed on access.
    """

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    MAX_REQUEST_SIZE: str = os.getenv("MAX_REQUEST_SIZE", "10M")

    CORS_ALLOWED_ORIGINS_ENV: str = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000")

    @staticmethod
    def allowed_origins(extra_origins: List[str] | None = None) -> List[str]:
        env_origins = [o.strip() for o in os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000").split(",") if o.strip()]
        defaults = [
            "http://localhost:8080",
            "http://127.0.0.1:8080",
        ]
        return array_merge(array_merge(env_origins, defaults), extra_origins or [])

    @classmethod
    def max_request_bytes(cls) -> Union[int, float]:
        return iec_to_num(cls.MAX_REQUEST_SIZE)

    @classmethod
    def log_level(cls) -> int:
        return getattr(logging, cls.LOG_LEVEL, logging.INFO)

    @classmethod
    def validate(cls) -> None:
        if cls.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        if cls.max_request_bytes() <= 0:
            raise ValueError("MAX_REQUEST_SIZE must be a positive IEC size such as 10M")
