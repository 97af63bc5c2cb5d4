"""Build the configured store repository."""
import logging

from larder.infra.Json_Store_Repository import JsonStoreRepository
from larder.infra.Sqlite_Store_Repository import SqliteStoreRepository
from larder.utilities.config import Settings

logger = logging.getLogger(__name__)


def build_repository(settings: Settings):
    """Return the repository selected by settings.storage ("json" or "sqlite")."""
    if settings.storage == 'sqlite':
        repo = SqliteStoreRepository(settings.db_file)
    else:
        repo = JsonStoreRepository(settings.data_file)
    logger.info("Using %r", repo)
    return repo
