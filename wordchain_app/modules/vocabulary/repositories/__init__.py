"""Interchangeable vocabulary storage backends."""

from flask import current_app

from ..config import STORAGE_BACKENDS
from .base import VocabularyRepository
from .json_file import JsonFileVocabularyRepository
from .memory import InMemoryVocabularyRepository
from .sql import SqlVocabularyRepository

_EXTENSION_KEY = 'vocabulary_repository'


def build_repository(backend: str, json_dir: str = None) -> VocabularyRepository:
    """Create the repository named by ``backend``."""
    if backend not in STORAGE_BACKENDS:
        raise ValueError(f"Unknown vocabulary storage backend {backend!r}, expected one of {STORAGE_BACKENDS}")
    if backend == 'sqlalchemy':
        return SqlVocabularyRepository()
    if backend == 'json_file':
        if not json_dir:
            raise ValueError("VOCAB_JSON_DIR is required for the json_file backend")
        return JsonFileVocabularyRepository(json_dir)
    return InMemoryVocabularyRepository()


def get_repository() -> VocabularyRepository:
    """Return the app-scoped repository configured by VOCAB_STORAGE_BACKEND."""
    repository = current_app.extensions.get(_EXTENSION_KEY)
    if repository is None:
        repository = build_repository(
            current_app.config.get('VOCAB_STORAGE_BACKEND', 'sqlalchemy'),
            current_app.config.get('VOCAB_JSON_DIR'),
        )
        current_app.extensions[_EXTENSION_KEY] = repository
        current_app.logger.info("Vocabulary repository: %s", type(repository).__name__)
    return repository


__all__ = [
    "VocabularyRepository",
    "InMemoryVocabularyRepository",
    "JsonFileVocabularyRepository",
    "SqlVocabularyRepository",
    "build_repository",
    "get_repository",
]
