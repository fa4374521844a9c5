import json
import logging
import os
import tempfile
from typing import Any, Dict, List

from wordchain_app.core.identity import UserContext
from ..schemas import UserSettings, VocabularyEntry
from .base import VocabularyRepository

logger = logging.getLogger(__name__)


class JsonFileVocabularyRepository(VocabularyRepository):
    """One JSON document per user under ``base_dir``.

    Document layout: ``{"items": [entry...], "settings": {...}, "userName": str|null}``.
    """

    def __init__(self, base_dir: str) -> None:
        self.base_dir = base_dir
        os.makedirs(base_dir, exist_ok=True)

    def _path_for(self, user: UserContext) -> str:
        # Device ids are restricted to [A-Za-z0-9_-], safe as file names
        return os.path.join(self.base_dir, f"{user.user_id}.json")

    def _load(self, user: UserContext) -> Dict[str, Any]:
        path = self._path_for(user)
        if not os.path.exists(path):
            return {}
        with open(path, 'r', encoding='utf-8') as handle:
            return json.load(handle)

    def _save(self, user: UserContext, document: Dict[str, Any]) -> None:
        path = self._path_for(user)
        fd, tmp_path = tempfile.mkstemp(dir=self.base_dir, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as handle:
                json.dump(document, handle, ensure_ascii=False, indent=2)
            os.replace(tmp_path, path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
        logger.debug("Saved vocabulary document %s", path)

    def read_all(self, user: UserContext) -> List[VocabularyEntry]:
        items = self._load(user).get('items') or []
        return [VocabularyEntry.from_dict(item) for item in items]

    def write_all(self, user: UserContext, entries: List[VocabularyEntry]) -> None:
        document = self._load(user)
        document['items'] = [entry.to_dict() for entry in entries]
        self._save(user, document)

    def read_settings(self, user: UserContext) -> UserSettings:
        document = self._load(user)
        return UserSettings(values=dict(document.get('settings') or {}), display_name=document.get('userName'))

    def write_settings(self, user: UserContext, settings: UserSettings) -> None:
        document = self._load(user)
        document['settings'] = dict(settings.values)
        document['userName'] = settings.display_name
        self._save(user, document)

    def clear(self, user: UserContext) -> None:
        path = self._path_for(user)
        if os.path.exists(path):
            os.remove(path)
