from datetime import datetime, timedelta
from typing import Optional, Dict, Any
from jose import ExpiredSignatureError, JWTError, jwt

from reliefhub.core.config import settings
from reliefhub.core.exceptions import AuthenticationError


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT access token shaped like the identity provider's.

    The service itself never issues credentials to end users; this is used
    by tests and local tooling to mint tokens the provider would issue.
    """
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    if settings.JWT_AUDIENCE:
        to_encode.setdefault("aud", settings.JWT_AUDIENCE)
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> Dict[str, Any]:
    """Decode and verify a bearer JWT"""
    options = {"verify_aud": bool(settings.JWT_AUDIENCE)}
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE or None,
            options=options,
        )
    except ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except JWTError:
        raise AuthenticationError("Could not validate credentials")


def extract_profile_claims(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Pull sign-up metadata (full_name, role, phone) out of a token payload.

    Providers put these under `user_metadata`; top-level claims are accepted
    as a fallback.
    """
    metadata = payload.get("user_metadata") or {}
    return {
        key: metadata.get(key, payload.get(key))
        for key in ("full_name", "role", "phone")
    }
