from __future__ import annotations

import logging
from typing import Mapping, Optional
from urllib.parse import quote

import requests

from wordchain_app.core.identity import UserContext
from ..config import DictionaryDefaultConfig
from ..engine.core import DictionaryPageParser
from ..exceptions import LookupFailed
from ..schemas import LookupResponse, LookupResult, SelectorRules

logger = logging.getLogger(__name__)


class DictionaryLookupService:
    """
    Fetches a dictionary page for a word and extracts its metadata.
    One GET per lookup, no retries; failures come back as LookupResponse data.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        url_template: str = DictionaryDefaultConfig.URL_TEMPLATE,
        timeout: float = DictionaryDefaultConfig.TIMEOUT_SECONDS,
        max_redirects: int = DictionaryDefaultConfig.MAX_REDIRECTS,
        headers: Optional[Mapping[str, str]] = None,
        rules: SelectorRules = DictionaryDefaultConfig.SELECTOR_RULES,
        source: str = DictionaryDefaultConfig.SOURCE_NAME,
    ) -> None:
        self.session = session or requests.Session()
        self.session.max_redirects = max_redirects
        self.url_template = url_template
        self.timeout = timeout
        self.headers = dict(headers or DictionaryDefaultConfig.REQUEST_HEADERS)
        self.parser = DictionaryPageParser(rules, source=source)

    def build_url(self, word: str) -> str:
        return self.url_template.format(word=quote(word, safe=''))

    def fetch_page(self, word: str) -> str:
        """GET the page for ``word``; raises LookupFailed on any transport problem."""
        try:
            url = self.build_url(word)
            response = self.session.get(
                url,
                headers=self.headers,
                timeout=self.timeout,
                allow_redirects=True,
            )
            response.raise_for_status()
        except (requests.RequestException, UnicodeError) as exc:
            raise LookupFailed(word, exc) from exc

        logger.debug("Fetched %s (status %s, %d bytes)", url, response.status_code, len(response.text))
        return response.text

    def lookup_result(self, word: str) -> LookupResult:
        """Fetch and parse; raises LookupFailed."""
        return self.parser.parse(self.fetch_page(word))

    def lookup(self, word: str, user: Optional[UserContext] = None) -> LookupResponse:
        """Look up ``word`` and return the success/failure response shape."""
        query = (word or '').strip()
        if not query:
            raise ValueError("word must be a non-empty string")

        requester = user.user_id if user else '-'
        logger.info("Scraping word %r for %s", query, requester)
        try:
            result = self.lookup_result(query)
        except LookupFailed as exc:
            logger.warning("Lookup failed for %r: %r", query, exc.cause)
            return LookupResponse.failed(str(exc.cause))

        missing = [name for name, value in result.to_dict().items() if not value]
        if missing:
            logger.info("Lookup for %r returned partial data, missing: %s", query, ", ".join(missing))
        return LookupResponse.ok(result)
