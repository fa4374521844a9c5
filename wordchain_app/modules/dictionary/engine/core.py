from __future__ import annotations

import logging
import re
from typing import Sequence, Tuple

from bs4 import BeautifulSoup, Tag

from ..exceptions import InvalidPartOfSpeech, ParseMismatch
from ..schemas import PARTS_OF_SPEECH, ExtractionRule, LookupResult, SelectorRules
from .pronunciation import emphasize_stress

logger = logging.getLogger(__name__)

_POS_WORD = re.compile(r'\b(' + '|'.join(PARTS_OF_SPEECH) + r')\b')


def collapse_whitespace(text: str) -> str:
    return ' '.join(text.split())


def first_match(soup: BeautifulSoup, rules: Sequence[ExtractionRule], field: str) -> Tuple[ExtractionRule, Tag, str]:
    """Return the first rule whose first matched element has non-empty text."""
    for rule in rules:
        element = soup.select_one(rule.selector)
        if element is None:
            continue
        text = collapse_whitespace(element.get_text())
        if text:
            logger.debug("Field %s matched selector %r", field, rule.selector)
            return rule, element, text
    raise ParseMismatch(field)


def normalize_part_of_speech(candidate: str) -> str:
    """Map candidate text onto the closed set.

    Exact member (case-insensitive) first, otherwise the first member that
    occurs as a whole word. Anything else raises InvalidPartOfSpeech.
    """
    lowered = collapse_whitespace(candidate or '').lower()
    if lowered in PARTS_OF_SPEECH:
        return lowered
    match = _POS_WORD.search(lowered)
    if match:
        return match.group(1)
    raise InvalidPartOfSpeech(candidate)


class DictionaryPageParser:
    """
    Extracts a LookupResult from a dictionary page.
    Pure Logic Layer: No HTTP, No Flask Context.
    """

    def __init__(self, rules: SelectorRules, source: str = ''):
        self.rules = rules
        self.source = source

    def extract_pronunciation(self, soup: BeautifulSoup) -> str:
        rule, element, text = first_match(soup, self.rules.pronunciation, 'pronunciation')
        value = element.decode_contents().strip() if rule.keep_markup else text
        return emphasize_stress(value)

    def extract_part_of_speech(self, soup: BeautifulSoup) -> str:
        _, _, text = first_match(soup, self.rules.part_of_speech, 'partOfSpeech')
        return normalize_part_of_speech(text)

    def extract_definition(self, soup: BeautifulSoup) -> str:
        _, _, text = first_match(soup, self.rules.definition, 'definition')
        return text

    def parse(self, html: str) -> LookupResult:
        soup = BeautifulSoup(html or '', 'html.parser')
        result = LookupResult(source=self.source)

        for attr, extractor in (
            ('pronunciation', self.extract_pronunciation),
            ('part_of_speech', self.extract_part_of_speech),
            ('definition', self.extract_definition),
        ):
            try:
                setattr(result, attr, extractor(soup))
            except (ParseMismatch, InvalidPartOfSpeech) as exc:
                # Missing fields are left for manual entry
                logger.debug("%s resolved to empty: %s", attr, exc)

        return result
