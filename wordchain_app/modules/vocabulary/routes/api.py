# File: vocabulary/routes/api.py
# Vocabulary, settings and backup endpoints

from flask import Response, jsonify, request
from flask_login import login_required

from . import vocabulary_bp
from wordchain_app.core.error_handlers import ValidationError, success_response
from wordchain_app.core.identity import current_context
from ..interface import get_backup_service, get_vocabulary_service
from ..utils import short_definition


def _entry_payload(entry) -> dict:
    payload = entry.to_dict()
    payload['status'] = entry.status
    payload['shortDefinition'] = short_definition(entry.definition)
    return payload


def _json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')
    return data


@vocabulary_bp.route('/api/vocabulary', methods=['GET'])
@login_required
def list_entries():
    """List entries. Query: ?status=all|new|consolidating|long-term|due&q=search"""
    entries = get_vocabulary_service().list_entries(
        current_context(),
        status=request.args.get('status', 'all'),
        search=request.args.get('q', ''),
    )
    return jsonify(success_response([_entry_payload(e) for e in entries]))


@vocabulary_bp.route('/api/vocabulary', methods=['POST'])
@login_required
def add_entry():
    """
    Store a confirmed word.
    Body: { "word": "...", "definition": "...", "pronunciation": "...", "partOfSpeech": "..." }
    """
    data = _json_body()
    entry = get_vocabulary_service().add_entry(
        current_context(),
        word=data.get('word'),
        definition=data.get('definition'),
        pronunciation=data.get('pronunciation'),
        part_of_speech=data.get('partOfSpeech'),
    )
    return jsonify(success_response(_entry_payload(entry))), 201


@vocabulary_bp.route('/api/vocabulary', methods=['DELETE'])
@login_required
def clear_entries():
    count = get_vocabulary_service().clear(current_context())
    return jsonify(success_response({'deleted': count}))


@vocabulary_bp.route('/api/vocabulary/stats', methods=['GET'])
@login_required
def entry_stats():
    stats = get_vocabulary_service().stats(current_context())
    return jsonify(success_response(stats.to_dict()))


@vocabulary_bp.route('/api/vocabulary/<entry_id>', methods=['GET'])
@login_required
def get_entry(entry_id):
    entry = get_vocabulary_service().get_entry(current_context(), entry_id)
    return jsonify(success_response(_entry_payload(entry)))


@vocabulary_bp.route('/api/vocabulary/<entry_id>', methods=['PATCH'])
@login_required
def update_entry(entry_id):
    entry = get_vocabulary_service().update_entry(current_context(), entry_id, _json_body())
    return jsonify(success_response(_entry_payload(entry)))


@vocabulary_bp.route('/api/vocabulary/<entry_id>', methods=['DELETE'])
@login_required
def delete_entry(entry_id):
    get_vocabulary_service().delete_entry(current_context(), entry_id)
    return jsonify(success_response())


@vocabulary_bp.route('/api/settings', methods=['GET'])
@login_required
def get_settings():
    settings = get_vocabulary_service().get_settings(current_context())
    return jsonify(success_response(settings.to_dict()))


@vocabulary_bp.route('/api/settings', methods=['PUT'])
@login_required
def update_settings():
    """Body: { "settings": {...}, "userName": "..." } (both optional)"""
    data = _json_body()
    settings = get_vocabulary_service().update_settings(
        current_context(),
        changes=data.get('settings'),
        display_name=data.get('userName'),
    )
    return jsonify(success_response(settings.to_dict()))


@vocabulary_bp.route('/api/backup', methods=['GET'])
@login_required
def export_backup():
    return jsonify(get_backup_service().export_backup(current_context()))


@vocabulary_bp.route('/api/backup/restore', methods=['POST'])
@login_required
def restore_backup():
    restored = get_backup_service().restore_backup(current_context(), request.get_json(silent=True))
    return jsonify(success_response({'restored': restored}))


@vocabulary_bp.route('/api/backup/csv', methods=['GET'])
@login_required
def export_csv():
    csv_text = get_backup_service().export_csv(current_context())
    return Response(
        csv_text,
        mimetype='text/csv',
        headers={'Content-Disposition': 'attachment; filename=wordchain_vocabulary.csv'},
    )
