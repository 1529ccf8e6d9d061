"""Pure validation helpers (ISBN, calendar dates, email addresses)."""
