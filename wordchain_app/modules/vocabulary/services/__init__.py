from .backup_service import BackupService
from .vocabulary_service import VocabularyService

__all__ = ["BackupService", "VocabularyService"]
