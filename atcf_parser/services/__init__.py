"""Parsing services."""
