from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from siteops.services.auth_service import decode_token

security = HTTPBearer(auto_error=False)


def get_actor_id(credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> int:
    """Resolve the acting user id from the bearer token's ``sub`` claim.

    Only identity is established here; whether the user exists is left to the
    operation that records it.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
        )
    payload = decode_token(credentials.credentials)
    sub = payload.get("sub")
    if sub is None:
        raise HTTPException(status_code=401, detail="Invalid token payload")
    try:
        return int(sub)
    except (TypeError, ValueError):
        raise HTTPException(status_code=401, detail="Invalid token payload")
