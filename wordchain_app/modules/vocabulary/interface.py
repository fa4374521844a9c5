from .repositories import get_repository
from .services import BackupService, VocabularyService


def get_vocabulary_service() -> VocabularyService:
    """Public API: vocabulary service bound to the configured repository."""
    return VocabularyService(get_repository())


def get_backup_service() -> BackupService:
    """Public API: backup service bound to the configured repository."""
    return BackupService(get_repository())
