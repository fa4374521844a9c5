"""Stress marking for pronunciation markup.

Dictionary pages mark the stressed syllable in bold. The convention in
Wordchain is to show that syllable in capitals too, so the text inside bold
spans is uppercased while the rest of the fragment is left alone.
"""

from __future__ import annotations

import re

from bs4 import BeautifulSoup, Comment, Tag

_BOLD_STYLE = re.compile(r'font-weight\s*:\s*(bold|bolder|[6-9]00)', re.IGNORECASE)


def is_emphasis_tag(tag: Tag) -> bool:
    if tag.name in ('b', 'strong'):
        return True
    if tag.name == 'span':
        return bool(_BOLD_STYLE.search(tag.get('style') or ''))
    return False


def emphasize_stress(markup: str) -> str:
    """Uppercase the text inside bold spans of ``markup``.

    Idempotent: the output is already in the parser's serialized form and
    uppercasing uppercase text changes nothing, so a second pass returns the
    same string.
    """
    if not markup:
        return markup or ''

    fragment = BeautifulSoup(markup, 'html.parser')
    for tag in fragment.find_all(is_emphasis_tag):
        for node in tag.find_all(string=True):
            if isinstance(node, Comment):
                continue
            upper = node.upper()
            if upper != node:
                node.replace_with(upper)
    return fragment.decode()
