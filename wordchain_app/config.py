# File: wordchain_app/config.py
# Application configuration loaded through app.config.from_object.

import os

# Project root (the directory that contains wordchain_app/)
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

DATABASE_PATH = os.path.join(BASE_DIR, "database", "wordchain.db")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """
    Configuration for the Flask application.
    """
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'a_very_secret_key_for_wordchain'

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Vocabulary storage: 'sqlalchemy', 'json_file' or 'memory'
    VOCAB_STORAGE_BACKEND = os.environ.get('VOCAB_STORAGE_BACKEND', 'sqlalchemy')
    VOCAB_JSON_DIR = os.environ.get('VOCAB_JSON_DIR') or os.path.join(BASE_DIR, 'database', 'vocabulary')

    # Dictionary scraping
    DICTIONARY_URL_TEMPLATE = os.environ.get(
        'DICTIONARY_URL_TEMPLATE', 'https://www.dictionary.com/browse/{word}'
    )
    DICTIONARY_TIMEOUT_SECONDS = float(os.environ.get('DICTIONARY_TIMEOUT_SECONDS', 15))
    DICTIONARY_MAX_REDIRECTS = int(os.environ.get('DICTIONARY_MAX_REDIRECTS', 5))

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')
    LOG_JSON = _env_flag('LOG_JSON', False)
    LOG_TO_FILE = _env_flag('LOG_TO_FILE', True)

    # Make sure the database directory exists when the app starts
    db_dir = os.path.dirname(DATABASE_PATH)
    if not os.path.exists(db_dir):
        os.makedirs(db_dir)
