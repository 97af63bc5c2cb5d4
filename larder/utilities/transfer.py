"""
Export and import of the whole store as a JSON document.

The document has the same layout as the JSON backend's data file, so this is
also how data moves between the JSON and SQLite backends:

    LARDER_STORAGE=json   python -m larder.utilities.transfer export --file larder.json
    LARDER_STORAGE=sqlite python -m larder.utilities.transfer import --file larder.json
"""
import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from larder.domain.Store import Store
from larder.infra.Json_Store_Repository import JsonStoreRepository
from larder.infra.repository_factory import build_repository
from larder.utilities.config import load_settings
from larder.utilities.exceptions import StorageError

logger = logging.getLogger(__name__)


def export_store(repository, output_path: Optional[Path] = None) -> Path:
    """Write the repository's current store to a JSON document and return its path."""
    if output_path is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path(f"larder_export_{timestamp}.json")
    store = repository.load()
    JsonStoreRepository(output_path).save(store)
    logger.info("Exported %s to %s", store, output_path)
    return Path(output_path)


def import_store(repository, input_path: Path) -> Store:
    """Replace the repository's contents with the store held in a JSON document."""
    input_path = Path(input_path)
    if not input_path.exists():
        raise FileNotFoundError(f"Import file not found: {input_path}")
    store = JsonStoreRepository(input_path).load()
    repository.save(store)
    logger.info("Imported %s from %s", store, input_path)
    return store


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Export/Import Larder data')
    parser.add_argument('action', choices=['export', 'import'], help='Action to perform')
    parser.add_argument('--file', help='Input/output file path')
    args = parser.parse_args(argv)

    settings = load_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
    repository = build_repository(settings)

    try:
        if args.action == 'export':
            result = export_store(repository, Path(args.file) if args.file else None)
            print(f"Exported to: {result}")
        else:
            if not args.file:
                print("Error: --file is required for import", file=sys.stderr)
                return 1
            store = import_store(repository, Path(args.file))
            print(f"Imported {len(store.pantry_items)} pantry items and "
                  f"{len(store.freezer_meals)} freezer meals from: {args.file}")
    except (StorageError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
