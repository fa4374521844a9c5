# File: dictionary/routes/api.py
# Dictionary scraping API

from datetime import datetime, timezone

from flask import current_app, jsonify, request
from flask_login import current_user

from . import dictionary_bp
from ..interface import lookup_word


@dictionary_bp.route('/api/test', methods=['GET'])
def api_test():
    """Health check used by clients before their first lookup."""
    return jsonify({
        'success': True,
        'message': 'API is working!',
        'timestamp': datetime.now(timezone.utc).isoformat()
    })


@dictionary_bp.route('/api/scrape-dictionary', methods=['POST'])
def scrape_dictionary():
    """
    Look up a word on the dictionary site.
    Body: { "word": "ephemeral" }
    """
    data = request.get_json(silent=True) or {}
    word = data.get('word')
    if not isinstance(word, str) or not word.strip():
        return jsonify({'success': False, 'error': 'Word is required'}), 400

    # Identity is optional here; it only tags the log lines
    user = current_user.context if current_user.is_authenticated else None
    result = lookup_word(word, user=user)

    if result.success:
        return jsonify(result.to_dict()), 200

    current_app.logger.error("Scraping error for %r: %r", word.strip(), result.details)
    return jsonify(result.to_dict()), 500
