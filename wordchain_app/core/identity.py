"""Request identity: turns the device headers into an explicit UserContext.

There are no login screens. A client names itself with the ``X-Device-Id``
header (an anonymous id it generated once and keeps), optionally with a
display name in ``X-User-Name``. Flask-Login's request loader turns that into
``current_user`` for the request; services only ever receive the
``UserContext`` value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from flask import Flask, jsonify
from flask_login import UserMixin

from .extensions import login_manager

DEVICE_HEADER = 'X-Device-Id'
USER_NAME_HEADER = 'X-User-Name'
DEFAULT_DISPLAY_NAME = 'Anonymous'

_DEVICE_ID_PATTERN = re.compile(r'^[A-Za-z0-9_-]{1,64}$')


@dataclass(frozen=True)
class UserContext:
    """Who a store or lookup call is made for."""

    user_id: str
    display_name: str = DEFAULT_DISPLAY_NAME


class DeviceUser(UserMixin):
    """Flask-Login user backed by a device id."""

    def __init__(self, context: UserContext) -> None:
        self.context = context

    def get_id(self) -> str:
        return self.context.user_id


def is_valid_device_id(device_id: Optional[str]) -> bool:
    return bool(device_id) and bool(_DEVICE_ID_PATTERN.match(device_id))


def context_from_headers(headers) -> Optional[UserContext]:
    """Build a UserContext from request headers, or None if absent/malformed."""
    device_id = (headers.get(DEVICE_HEADER) or '').strip()
    if not is_valid_device_id(device_id):
        return None
    display_name = (headers.get(USER_NAME_HEADER) or '').strip()[:80]
    return UserContext(user_id=device_id, display_name=display_name or DEFAULT_DISPLAY_NAME)


def register_identity(app: Flask) -> None:
    """Wire the header-based loader into Flask-Login."""

    @login_manager.request_loader
    def load_user_from_request(request):
        context = context_from_headers(request.headers)
        if context is None:
            return None
        return DeviceUser(context)

    @login_manager.unauthorized_handler
    def handle_unauthorized():
        return jsonify({'success': False, 'error': 'Device identity required', 'code': 'UNAUTHORIZED'}), 401

    app.logger.debug("Device identity loader registered (header %s).", DEVICE_HEADER)


def current_context() -> UserContext:
    """UserContext of the authenticated request; call only behind login_required."""
    from flask_login import current_user

    return current_user.context
