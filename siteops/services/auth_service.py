"""Actor token helpers. Tokens are normally minted by the external session system."""

from datetime import timedelta
from jose import JWTError, jwt
from fastapi import HTTPException, status
from siteops.config import settings
from siteops.utils.helpers import utcnow

ALGORITHM = "HS256"


def create_access_token(user_id: int) -> str:
    expire = utcnow() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": str(user_id), "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
