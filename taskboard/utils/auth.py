# taskboard/utils/auth.py
from typing import Optional

from fastapi import Header

from taskboard.config.settings import settings


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """Resolve the caller identity for the request

    There is no authentication layer, so the caller is whoever the
    ``X-User-Id`` header names, falling back to the configured default user.
    """
    if x_user_id and x_user_id.strip():
        return x_user_id.strip()
    return settings.DEFAULT_USER_ID
