import os
from typing import Annotated

from fastapi import Header, HTTPException


def require_admin(
    x_admin_token: Annotated[str | None, Header(alias="x-admin-token")] = None,
) -> None:
    """
    Admin guard. When ADMIN_TOKEN is configured the X-Admin-Token header must match it;
    with no token configured the admin routes stay open.
    Read per request so the token can be rotated without a restart.
    """
    expected = os.getenv("ADMIN_TOKEN", "")
    if not expected:
        return
    if x_admin_token != expected:
        raise HTTPException(status_code=401, detail="Unauthorized.")
