import copy
import threading
from typing import Dict, List

from wordchain_app.core.identity import UserContext
from ..schemas import UserSettings, VocabularyEntry
from .base import VocabularyRepository


class InMemoryVocabularyRepository(VocabularyRepository):
    """Process-local store; contents are lost on restart."""

    def __init__(self) -> None:
        self._entries: Dict[str, List[VocabularyEntry]] = {}
        self._settings: Dict[str, UserSettings] = {}
        self._lock = threading.Lock()

    def read_all(self, user: UserContext) -> List[VocabularyEntry]:
        with self._lock:
            return copy.deepcopy(self._entries.get(user.user_id, []))

    def write_all(self, user: UserContext, entries: List[VocabularyEntry]) -> None:
        with self._lock:
            self._entries[user.user_id] = copy.deepcopy(list(entries))

    def read_settings(self, user: UserContext) -> UserSettings:
        with self._lock:
            return copy.deepcopy(self._settings.get(user.user_id, UserSettings()))

    def write_settings(self, user: UserContext, settings: UserSettings) -> None:
        with self._lock:
            self._settings[user.user_id] = copy.deepcopy(settings)

    def clear(self, user: UserContext) -> None:
        with self._lock:
            self._entries.pop(user.user_id, None)
            self._settings.pop(user.user_id, None)
