from flask import Blueprint

dictionary_bp = Blueprint('dictionary', __name__)

from . import api  # noqa: E402,F401
