from flask import Blueprint

review_bp = Blueprint('review', __name__)

from . import api  # noqa: E402,F401
