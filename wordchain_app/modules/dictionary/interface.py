# File: wordchain_app/modules/dictionary/interface.py
from typing import Optional

from flask import current_app

from wordchain_app.core.identity import UserContext
from .config import DictionaryDefaultConfig
from .schemas import LookupResponse
from .services.lookup_service import DictionaryLookupService

_EXTENSION_KEY = 'dictionary_lookup_service'


def get_lookup_service() -> DictionaryLookupService:
    """Return the app-scoped lookup service, building it from config on first use."""
    service = current_app.extensions.get(_EXTENSION_KEY)
    if service is None:
        config = current_app.config
        service = DictionaryLookupService(
            url_template=config.get('DICTIONARY_URL_TEMPLATE', DictionaryDefaultConfig.URL_TEMPLATE),
            timeout=float(config.get('DICTIONARY_TIMEOUT_SECONDS', DictionaryDefaultConfig.TIMEOUT_SECONDS)),
            max_redirects=int(config.get('DICTIONARY_MAX_REDIRECTS', DictionaryDefaultConfig.MAX_REDIRECTS)),
        )
        current_app.extensions[_EXTENSION_KEY] = service
    return service


def lookup_word(word: str, user: Optional[UserContext] = None) -> LookupResponse:
    """
    Public API to look up a word.
    """
    return get_lookup_service().lookup(word, user=user)
