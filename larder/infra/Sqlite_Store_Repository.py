"""Store repository backed by SQLite.

Each save deletes and reinserts every row of both tables inside one
transaction, so a failed save leaves the previous contents untouched. The id
counters are not stored; Store derives them from the rows on load.
"""
import logging
import sqlite3
from pathlib import Path

from larder.domain.FreezerMeal import FreezerMeal
from larder.domain.PantryItem import PantryItem
from larder.domain.Store import Store
from larder.utilities.exceptions import StorageError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS pantry_items (
    id       INTEGER PRIMARY KEY,
    name     TEXT NOT NULL,
    quantity TEXT,
    category TEXT,
    expiry   TEXT,
    notes    TEXT
);
CREATE TABLE IF NOT EXISTS freezer_meals (
    id          INTEGER PRIMARY KEY,
    name        TEXT NOT NULL,
    portions    TEXT,
    date_frozen TEXT,
    description TEXT
);
"""

PANTRY_COLUMNS = ("id",) + PantryItem.FIELDS
MEAL_COLUMNS = ("id",) + FreezerMeal.FIELDS


def _row_to_dict(row: sqlite3.Row) -> dict:
    # NULL columns come back as None; domain from_dict turns those into ""
    return {key: row[key] for key in row.keys()}


class SqliteStoreRepository:
    def __init__(self, db_path):
        self.db_path = Path(db_path)

    def _connect(self, operation: str) -> sqlite3.Connection:
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self.db_path))
        except (OSError, sqlite3.Error) as e:
            logger.error("Could not open database %s: %s", self.db_path, e)
            raise StorageError(f"Could not open {self.db_path}: {e}", operation=operation) from e
        conn.row_factory = sqlite3.Row
        try:
            init_schema(conn)
        except sqlite3.Error as e:
            conn.close()
            logger.error("Could not initialise schema in %s: %s", self.db_path, e)
            raise StorageError(f"Could not initialise {self.db_path}: {e}", operation=operation) from e
        return conn

    def load(self) -> Store:
        conn = self._connect("load")
        try:
            pantry_rows = conn.execute(
                f"SELECT {', '.join(PANTRY_COLUMNS)} FROM pantry_items ORDER BY id").fetchall()
            meal_rows = conn.execute(
                f"SELECT {', '.join(MEAL_COLUMNS)} FROM freezer_meals ORDER BY id").fetchall()
            return Store(
                pantry_items=[PantryItem.from_dict(_row_to_dict(r)) for r in pantry_rows],
                freezer_meals=[FreezerMeal.from_dict(_row_to_dict(r)) for r in meal_rows],
            )
        except (sqlite3.Error, ValueError) as e:
            logger.error("Could not read database %s: %s", self.db_path, e)
            raise StorageError(f"Could not read {self.db_path}: {e}", operation="load") from e
        finally:
            conn.close()

    def save(self, store: Store) -> None:
        conn = self._connect("save")
        try:
            # Commits on success, rolls back everything on any exception
            with conn:
                conn.execute("DELETE FROM pantry_items")
                conn.executemany(
                    f"INSERT INTO pantry_items ({', '.join(PANTRY_COLUMNS)}) VALUES (?, ?, ?, ?, ?, ?)",
                    [tuple(item.to_dict()[c] for c in PANTRY_COLUMNS) for item in store.pantry_items],
                )
                conn.execute("DELETE FROM freezer_meals")
                conn.executemany(
                    f"INSERT INTO freezer_meals ({', '.join(MEAL_COLUMNS)}) VALUES (?, ?, ?, ?, ?)",
                    [tuple(meal.to_dict()[c] for c in MEAL_COLUMNS) for meal in store.freezer_meals],
                )
        except sqlite3.Error as e:
            logger.error("Could not write database %s, transaction rolled back: %s", self.db_path, e)
            raise StorageError(f"Could not write {self.db_path}: {e}", operation="save") from e
        finally:
            conn.close()
        logger.debug("Saved %s to %s", store, self.db_path)

    def __repr__(self) -> str:
        return f"SqliteStoreRepository({str(self.db_path)!r})"


def init_schema(conn: sqlite3.Connection) -> None:
    """Create both tables if they are missing. Safe to call repeatedly."""
    conn.executescript(SCHEMA)
