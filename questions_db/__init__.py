"""Data-access layer for a questions & answers SQLite database."""
