# modules/dictionary/config.py
from .schemas import ExtractionRule, SelectorRules

_PRONUNCIATION_RULES = (
    ExtractionRule("#dictionary-entry-1 > div:nth-child(1) > section > div.aB40zqNSml1nCbUuOh7V > p", keep_markup=True),
    ExtractionRule("[data-testid='pronunciation']", keep_markup=True),
    ExtractionRule(".pronunciation", keep_markup=True),
    ExtractionRule(".pron", keep_markup=True),
    ExtractionRule("[class*='pronunciation']", keep_markup=True),
)

_PART_OF_SPEECH_RULES = (
    ExtractionRule("[data-testid='part-of-speech']"),
    ExtractionRule(".luna-part-of-speech"),
    ExtractionRule(".part-of-speech"),
    ExtractionRule(".pos"),
    ExtractionRule("[class*='part-of-speech']"),
    ExtractionRule("h2[class*='pos']"),
    ExtractionRule("h3[class*='pos']"),
    ExtractionRule(".dictionary-entry-header h2"),
    ExtractionRule("[class*='entry-header'] h2"),
    ExtractionRule("h2"),
)

_DEFINITION_RULES = (
    ExtractionRule("#dictionary-entry-1 > div:nth-child(2) > section > div:nth-child(1) > ol li"),
    ExtractionRule("[data-testid='definition']"),
    ExtractionRule(".definition"),
    ExtractionRule(".def"),
    ExtractionRule("[class*='definition'] li"),
    ExtractionRule("ol li"),
)


class DictionaryDefaultConfig:
    SOURCE_NAME = 'Dictionary.com'
    URL_TEMPLATE = 'https://www.dictionary.com/browse/{word}'
    TIMEOUT_SECONDS = 15.0
    MAX_REDIRECTS = 5
    REQUEST_HEADERS = {
        'User-Agent': (
            'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
            '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
        ),
        'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
        'Accept-Language': 'en-US,en;q=0.5',
        'Connection': 'keep-alive',
        'Upgrade-Insecure-Requests': '1',
        'Cache-Control': 'no-cache',
    }
    SELECTOR_RULES = SelectorRules(
        pronunciation=_PRONUNCIATION_RULES,
        part_of_speech=_PART_OF_SPEECH_RULES,
        definition=_DEFINITION_RULES,
    )
