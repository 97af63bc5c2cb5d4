"""Store repository backed by a single JSON document that is rewritten on every save."""
import contextlib
import json
import logging
import os
import tempfile
from pathlib import Path

from larder.domain.Store import Store
from larder.utilities.exceptions import StorageError

logger = logging.getLogger(__name__)


class JsonStoreRepository:
    def __init__(self, path):
        self.path = Path(path)

    def load(self) -> Store:
        """Read the whole store; a missing file means nothing has been saved yet."""
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.info("Data file %s not found, starting with an empty store", self.path)
            return Store()
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error("Could not read data file %s: %s", self.path, e)
            raise StorageError(f"Could not read {self.path}: {e}", operation="load") from e
        try:
            return Store.from_dict(data)
        except ValueError as e:
            logger.error("Data file %s is malformed: %s", self.path, e)
            raise StorageError(f"Malformed data in {self.path}: {e}", operation="load") from e

    def save(self, store: Store) -> None:
        """Atomically replace the data file: write a sibling temp file, then rename over."""
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".larder_", suffix=".json")
            with os.fdopen(fd, 'w', encoding='utf-8') as tmp:
                json.dump(store.to_dict(), tmp, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
            tmp_path = None
        except (OSError, TypeError, ValueError) as e:
            logger.error("Could not write data file %s: %s", self.path, e)
            raise StorageError(f"Could not write {self.path}: {e}", operation="save") from e
        finally:
            if tmp_path is not None:
                with contextlib.suppress(OSError):
                    os.remove(tmp_path)
        logger.debug("Saved %s to %s", store, self.path)

    def __repr__(self) -> str:
        return f"JsonStoreRepository({str(self.path)!r})"
