from .core import DictionaryPageParser, first_match, normalize_part_of_speech
from .pronunciation import emphasize_stress

__all__ = ["DictionaryPageParser", "first_match", "normalize_part_of_speech", "emphasize_stress"]
