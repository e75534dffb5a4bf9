"""Request dependencies shared by the API routers."""
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from taskflow.auth import decode_access_token
from taskflow.errors import AuthenticationError

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> int:
    """Resolve the bearer credential to the acting user's id."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError()

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        raise AuthenticationError("Invalid or expired token")
    return user_id
