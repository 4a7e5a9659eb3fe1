"""
Authentication module for admin API key and Clerk JWT validation.
Provides FastAPI dependencies for securing the import endpoints.
"""
import os
import jwt
from fastapi import Depends, HTTPException, Header
from typing import Any, Dict, Optional
import logging

from exercise_import_api.config import settings

logger = logging.getLogger(__name__)

# Clerk JWKS for JWT validation
CLERK_DOMAIN = os.getenv("CLERK_DOMAIN", "")
CLERK_JWKS_URL = f"https://{CLERK_DOMAIN}/.well-known/jwks.json" if CLERK_DOMAIN else ""
_jwks_client = None


def get_jwks_client():
    """Get or create the JWKS client for Clerk JWT validation."""
    global _jwks_client
    if _jwks_client is None and CLERK_DOMAIN:
        _jwks_client = jwt.PyJWKClient(CLERK_JWKS_URL)
    return _jwks_client


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key")
) -> Dict[str, Any]:
    """
    Authenticate via API key OR Clerk JWT.
    Returns {"user_id": str, "role": Optional[str]}.
    """
    # Option 1: API Key authentication
    if x_api_key:
        return {"user_id": validate_api_key(x_api_key), "role": settings.ADMIN_ROLE}

    # Option 2: Clerk JWT authentication
    if authorization:
        payload = validate_jwt(authorization)
        return {"user_id": payload["sub"], "role": extract_role(payload)}

    raise HTTPException(
        status_code=401,
        detail="Missing authentication. Provide Authorization header or X-API-Key."
    )


async def require_admin(user: Dict[str, Any] = Depends(get_current_user)) -> str:
    """
    Allow only administrators. Returns the user_id.

    Usage:
        @router.post("/admin-only")
        async def handler(user_id: str = Depends(require_admin)):
            ...
    """
    if user.get("role") != settings.ADMIN_ROLE:
        logger.warning(f"Non-admin user {user.get('user_id')} denied access to admin endpoint")
        raise HTTPException(status_code=403, detail="Forbidden - Admin access required")
    return user["user_id"]


def validate_api_key(api_key: str) -> str:
    """
    Validate API key and return user_id.

    API key format options:
    - Simple: "sk_test_abc123" -> returns "admin"
    - With user: "sk_test_abc123:user_12345" -> returns "user_12345"
    """
    valid_keys = [k.strip() for k in os.getenv("API_KEYS", "").split(",") if k.strip()]

    if not valid_keys:
        logger.warning("No API keys configured (API_KEYS env var empty)")
        raise HTTPException(status_code=401, detail="API key authentication not configured")

    # Check if key (without user suffix) is valid
    key_part = api_key.split(":")[0]

    if key_part not in valid_keys:
        raise HTTPException(status_code=401, detail="Invalid API key")

    # Extract user_id if provided (format: "key:user_id")
    if ":" in api_key:
        return api_key.split(":", 1)[1]

    return "admin"  # Default for simple API keys


def validate_jwt(authorization: str) -> Dict[str, Any]:
    """Validate Clerk JWT and return its payload."""
    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header format")

    token = authorization.split(" ", 1)[1]
    jwks_client = get_jwks_client()

    if not jwks_client:
        raise HTTPException(
            status_code=500,
            detail="JWT validation not configured (missing CLERK_DOMAIN)"
        )

    try:
        signing_key = jwks_client.get_signing_key_from_jwt(token)
        payload = jwt.decode(
            token,
            signing_key.key,
            algorithms=["RS256"],
            options={"verify_aud": False}
        )
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.InvalidTokenError as e:
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")

    if not payload.get("sub"):
        raise HTTPException(status_code=401, detail="Token missing user ID")
    return payload


def extract_role(payload: Dict[str, Any]) -> Optional[str]:
    """Read the role claim from a top-level, metadata or public_metadata field."""
    if payload.get("role"):
        return payload["role"]
    for key in ("metadata", "public_metadata"):
        claims = payload.get(key)
        if isinstance(claims, dict) and claims.get("role"):
            return claims["role"]
    return None
