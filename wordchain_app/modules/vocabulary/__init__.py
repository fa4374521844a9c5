"""Vocabulary store: entries, settings and backups per user."""
