"""Bookstore API: CRUD over books, authors and users kept in one JSON document."""

__version__ = "1.0.0"
