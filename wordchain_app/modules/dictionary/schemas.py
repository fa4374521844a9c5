# File: wordchain_app/modules/dictionary/schemas.py
from dataclasses import dataclass
from typing import Optional, Tuple

# Closed set of accepted parts of speech
PARTS_OF_SPEECH: Tuple[str, ...] = (
    'noun',
    'verb',
    'adjective',
    'adverb',
    'preposition',
    'conjunction',
    'interjection',
    'pronoun',
    'determiner',
    'particle',
)

LOOKUP_FAILED_MESSAGE = 'Failed to scrape dictionary'


@dataclass(frozen=True)
class ExtractionRule:
    """One CSS selector tried against the page.

    ``keep_markup`` returns the inner HTML of the matched element instead of
    its text.
    """
    selector: str
    keep_markup: bool = False


@dataclass(frozen=True)
class SelectorRules:
    """Ordered fallback rules per field, most specific first."""
    pronunciation: Tuple[ExtractionRule, ...] = ()
    part_of_speech: Tuple[ExtractionRule, ...] = ()
    definition: Tuple[ExtractionRule, ...] = ()


@dataclass
class LookupResult:
    pronunciation: str = ''
    part_of_speech: str = ''
    definition: str = ''
    source: str = ''

    def to_dict(self) -> dict:
        return {
            'pronunciation': self.pronunciation,
            'definition': self.definition,
            'partOfSpeech': self.part_of_speech,
            'source': self.source,
        }


@dataclass
class LookupResponse:
    """What the adapter hands its caller: success with data, or failure data."""
    success: bool
    data: Optional[LookupResult] = None
    error: Optional[str] = None
    details: Optional[str] = None

    @classmethod
    def ok(cls, result: LookupResult) -> 'LookupResponse':
        return cls(success=True, data=result)

    @classmethod
    def failed(cls, details: str) -> 'LookupResponse':
        return cls(success=False, error=LOOKUP_FAILED_MESSAGE, details=details)

    def to_dict(self) -> dict:
        if self.success:
            return {'success': True, 'data': self.data.to_dict()}
        payload = {'success': False, 'error': self.error}
        if self.details is not None:
            payload['details'] = self.details
        return payload
