"""Admin API key validation."""
import secrets

from fastapi import Header, HTTPException

from storefront.config import get_admin_api_key
from storefront.errors import ERROR_ADMIN_KEY_NOT_CONFIGURED, ERROR_UNAUTHORIZED


async def verify_admin(
    authorization: str = Header(None, alias="Authorization")
):
    """
    Verify ADMIN_API_KEY for admin panel endpoints.

    Expects `Authorization: Bearer <ADMIN_API_KEY>`.
    """
    admin_key = get_admin_api_key()

    if not admin_key:
        raise HTTPException(status_code=500, detail=ERROR_ADMIN_KEY_NOT_CONFIGURED)

    if not authorization or not secrets.compare_digest(authorization, f"Bearer {admin_key}"):
        raise HTTPException(status_code=403, detail=ERROR_UNAUTHORIZED)

    return True
