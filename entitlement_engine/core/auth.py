from __future__ import annotations

import secrets

from fastapi import Header, HTTPException

from entitlement_engine.shared.config import get_settings


def require_service_token(authorization: str | None = Header(default=None)) -> str | None:
    expected = get_settings().service_api_token
    if not expected:
        return None
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid token.")
    token = authorization.replace("Bearer ", "", 1).strip()
    if not token or not secrets.compare_digest(token.encode(), expected.encode()):
        raise HTTPException(status_code=401, detail="Invalid token.")
    return token
