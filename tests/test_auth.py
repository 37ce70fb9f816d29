import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from siteops.config import settings
from siteops.middleware.auth_middleware import get_actor_id
from siteops.services.auth_service import ALGORITHM, create_access_token, decode_token


def _credentials(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def test_actor_id_comes_from_subject_claim():
    assert get_actor_id(_credentials(create_access_token(42))) == 42
    assert decode_token(create_access_token(7))["sub"] == "7"


def test_missing_credentials_are_unauthorized():
    with pytest.raises(HTTPException) as exc:
        get_actor_id(None)
    assert exc.value.status_code == 401


def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode({"sub": "1"}, "some-other-secret", algorithm=ALGORITHM)
    with pytest.raises(HTTPException) as exc:
        get_actor_id(_credentials(token))
    assert exc.value.status_code == 401


def test_non_numeric_subject_is_rejected():
    token = jwt.encode({"sub": "site-admin"}, settings.SECRET_KEY, algorithm=ALGORITHM)
    with pytest.raises(HTTPException) as exc:
        get_actor_id(_credentials(token))
    assert exc.value.status_code == 401
