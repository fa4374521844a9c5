from flask import Blueprint

vocabulary_bp = Blueprint('vocabulary', __name__)

from . import api  # noqa: E402,F401
from .. import events  # noqa: E402,F401
