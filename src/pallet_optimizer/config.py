"""Settings from the environment; loads .env locally via python-dotenv."""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    log_level: str = Field(default="INFO", description="Root log level")
    default_preset: str = Field(default="EUR", description="Pallet preset used when a request names none")
    # Run time grows roughly with the cube of the box count.
    max_boxes: int = Field(default=150, gt=0, description="Largest box count accepted by the API")
    cors_origin_regex: Optional[str] = Field(default=None, description="Allowed CORS origins for the API")


def get_settings() -> Settings:
    """Read settings from PALLET_OPTIMIZER_* variables. A .env file does not override the environment."""
    load_dotenv()
    values = {
        "log_level": os.getenv("PALLET_OPTIMIZER_LOG_LEVEL"),
        "default_preset": os.getenv("PALLET_OPTIMIZER_DEFAULT_PRESET"),
        "max_boxes": os.getenv("PALLET_OPTIMIZER_MAX_BOXES"),
        "cors_origin_regex": os.getenv("PALLET_OPTIMIZER_CORS_ORIGIN_REGEX"),
    }
    return Settings(**{k: v for k, v in values.items() if v})


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
