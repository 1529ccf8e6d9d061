"""One-off migration script: JSON root document (data.json) -> SQL backend."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the bookstore package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bookstore.core.config import get_settings  # noqa: E402
from bookstore.repositories.json_storage import JsonDocumentStore  # noqa: E402
from bookstore.repositories.sql_storage import SQLDocumentStore  # noqa: E402


def migrate(data_file: str, database_url: str) -> dict[str, int]:
    """Copy the whole document; returns the record count per collection."""
    if not Path(data_file).exists():
        raise SystemExit(f"Data file not found: {data_file}")
    if not database_url:
        raise SystemExit("DATABASE_URL (or --database-url) is required")
    document = JsonDocumentStore(data_file).read()
    target = SQLDocumentStore(database_url)
    target.initialize()
    target.write(document)
    return {name: len(records) for name, records in document.items()}


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copy the JSON root document into the SQL backend")
    ap.add_argument("--data-file", default=settings.data_file, help="JSON document (default: DATA_FILE)")
    ap.add_argument("--database-url", default=settings.database_url, help="SQLAlchemy URL (default: DATABASE_URL)")
    args = ap.parse_args()

    counts = migrate(args.data_file, args.database_url)
    print("JSON data migrated successfully.")
    for name, count in counts.items():
        print(f"  {name}: {count}")


if __name__ == "__main__":
    main()
