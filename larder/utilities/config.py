"""Configuration management for the Larder application."""
import os
from pathlib import Path
from typing import Final, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

BASE_DIR: Final[Path] = Path(__file__).parent.parent
DEFAULT_DATA_DIR: Final[Path] = Path('data')
STORAGE_BACKENDS: Final[tuple[str, ...]] = ('json', 'sqlite')


class Settings(BaseModel):
    """Runtime settings, built once at startup and handed to create_app()."""
    app_host: str = '0.0.0.0'
    port: int = Field(default=8080, ge=1, le=65535)
    storage: str = 'json'
    data_file: Path = DEFAULT_DATA_DIR / 'data.json'
    db_file: Path = DEFAULT_DATA_DIR / 'data.db'
    log_level: str = 'INFO'
    debug: bool = False

    @field_validator('storage')
    @classmethod
    def validate_storage(cls, v):
        """Only the two bundled backends are accepted."""
        v = v.strip().lower()
        if v not in STORAGE_BACKENDS:
            raise ValueError(f"LARDER_STORAGE must be one of {', '.join(STORAGE_BACKENDS)}, got {v!r}")
        return v

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v):
        return v.strip().upper() or 'INFO'


def load_settings(environ: Optional[Mapping[str, str]] = None, *, use_dotenv: bool = True) -> Settings:
    """Read settings from the environment (and a .env file in the working directory).

    Passing `environ` skips the process environment entirely, which is what the
    tests do.
    """
    if environ is None:
        if use_dotenv:
            load_dotenv()
        environ = os.environ
    # Unset keys fall back to the model defaults
    values = {
        'app_host': environ.get('APP_HOST'),
        'port': environ.get('PORT') or None,
        'storage': environ.get('LARDER_STORAGE'),
        'data_file': environ.get('LARDER_DATA_FILE'),
        'db_file': environ.get('LARDER_DB_FILE'),
        'log_level': environ.get('LOG_LEVEL'),
        'debug': environ.get('DEBUG', 'False').lower() == 'true',
    }
    return Settings(**{k: v for k, v in values.items() if v is not None})
