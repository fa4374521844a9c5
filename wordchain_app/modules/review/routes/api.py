import datetime

from flask import jsonify, request
from flask_login import login_required

from . import review_bp
from wordchain_app.core.error_handlers import ValidationError, success_response
from wordchain_app.core.identity import current_context
from ..interface import ReviewInterface


@review_bp.route('/queue', methods=['GET'])
@login_required
def study_queue():
    """Entries due today, each with the outcome of a pass and of a fail."""
    today = datetime.date.today()
    entries = ReviewInterface.get_service().study_queue(current_context(), today=today)
    data = []
    for entry in entries:
        payload = entry.to_dict()
        payload['status'] = entry.status
        payload['preview'] = ReviewInterface.preview(entry.stage, today)
        data.append(payload)
    return jsonify(success_response(data))


@review_bp.route('/<entry_id>', methods=['POST'])
@login_required
def grade_entry(entry_id):
    """
    Record a review outcome.
    Input: { "passed": bool }
    """
    data = request.get_json(silent=True) or {}
    passed = data.get('passed')
    if not isinstance(passed, bool):
        raise ValidationError('passed (boolean) is required', errors={'passed': passed})

    entry = ReviewInterface.get_service().grade(current_context(), entry_id, passed)
    payload = entry.to_dict()
    payload['status'] = entry.status
    return jsonify(success_response(payload))


@review_bp.route('/<entry_id>/postpone', methods=['POST'])
@login_required
def postpone_entry(entry_id):
    """Input: { "days": int } (optional, default 1)"""
    data = request.get_json(silent=True) or {}
    entry = ReviewInterface.get_service().postpone(current_context(), entry_id, days=data.get('days', 1))
    return jsonify(success_response(entry.to_dict()))
