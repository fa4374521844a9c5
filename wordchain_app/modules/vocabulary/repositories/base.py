"""Storage capability for vocabulary entries.

Every backend stores whole lists: the store reads all entries of a user,
changes them in memory and writes the list back. Lists are small, so this
keeps each backend trivial and interchangeable.
"""

from abc import ABC, abstractmethod
from typing import List

from wordchain_app.core.identity import UserContext
from ..schemas import UserSettings, VocabularyEntry


class VocabularyRepository(ABC):
    """Read-all / write-all / clear over one user's entries and settings."""

    @abstractmethod
    def read_all(self, user: UserContext) -> List[VocabularyEntry]:
        """Return the user's entries in stored order (empty list if none)."""

    @abstractmethod
    def write_all(self, user: UserContext, entries: List[VocabularyEntry]) -> None:
        """Replace the user's entries with ``entries``."""

    @abstractmethod
    def read_settings(self, user: UserContext) -> UserSettings:
        """Return stored settings; empty values if nothing was saved."""

    @abstractmethod
    def write_settings(self, user: UserContext, settings: UserSettings) -> None:
        pass

    @abstractmethod
    def clear(self, user: UserContext) -> None:
        """Remove the user's entries and settings."""
