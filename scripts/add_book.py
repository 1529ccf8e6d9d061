#!/usr/bin/env python3
"""
Add a book directly to the configured store, applying the API's validation.

Usage:
  python scripts/add_book.py --title "Dune" --author "Frank Herbert" \
      --date 1965-08-01 --isbn 978-0441172719
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pydantic import ValidationError  # noqa: E402

from bookstore.core.errors import BookstoreError  # noqa: E402
from bookstore.repositories.factory import build_store  # noqa: E402
from bookstore.schemas import BookCreate  # noqa: E402
from bookstore.services.entity_service import BOOK, EntityService  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a book to the bookstore data store")
    ap.add_argument("--title", required=True)
    ap.add_argument("--author", required=True)
    ap.add_argument("--date", required=True, help="Publication date (YYYY-MM-DD)")
    ap.add_argument("--isbn", required=True, help="ISBN-10 or ISBN-13")
    args = ap.parse_args()

    try:
        payload = BookCreate(title=args.title, author=args.author, publicationDate=args.date, ISBN=args.isbn)
    except ValidationError as exc:
        for err in exc.errors():
            field = ".".join(str(p) for p in err.get("loc", ()))
            sys.stderr.write(f"{field}: {err.get('msg')}\n")
        raise SystemExit(1)

    store = build_store()
    store.initialize()
    try:
        book = EntityService(store, BOOK).create(payload.model_dump())
    except BookstoreError as exc:
        raise SystemExit(f"Error: {exc.message}")
    print("OK: book added")
    print(f"  ID: {book['id']}")
    print(f"  Title: {book['title']}")


if __name__ == "__main__":
    main()
