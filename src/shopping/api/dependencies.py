"""Request dependencies for the Shopping API.

The caller's user id comes from the ``X-User-Id`` header set by the
gateway in front of the service. Tests replace ``current_user_id``
through ``app.dependency_overrides``.
"""

from fastapi import Header, HTTPException


async def current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Missing user identity")
    return x_user_id
