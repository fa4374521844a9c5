from .lookup_service import DictionaryLookupService

__all__ = ["DictionaryLookupService"]
