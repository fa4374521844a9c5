class DictionaryError(Exception):
    """Base exception for the dictionary module."""
    pass


class LookupFailed(DictionaryError):
    """Network error, timeout or non-2xx answer from the dictionary provider."""

    def __init__(self, word: str, cause: Exception):
        self.word = word
        self.cause = cause
        super().__init__(str(cause))


class ParseMismatch(DictionaryError):
    """No extraction rule produced text for a field."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"No selector matched field '{field}'")


class InvalidPartOfSpeech(DictionaryError):
    """Extracted part-of-speech text is outside the closed set."""

    def __init__(self, candidate: str):
        self.candidate = candidate
        super().__init__(f"Rejected part of speech candidate: {candidate!r}")
