"""Data models for decoded ATCF decks."""
