from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from toolrental.core.config import settings

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict:
    """Validate the bearer token issued by the authentication service.

    Returns the decoded JWT payload to downstream dependencies. Raises an HTTP 401
    error when the token is missing or invalid.
    """

    if credentials is None or not credentials.scheme or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = credentials.credentials

    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
        )
    except JWTError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc

    return payload


def get_current_user_id(payload: dict = Depends(get_current_user)) -> int:
    """Resolve the numeric caller id from the ``sub`` claim of the token."""

    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token does not identify a user",
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


def token_roles(payload: dict) -> set[str]:
    """Collect the role names carried by the token.

    The authentication service may issue a single ``role`` claim or a ``roles``
    list; both are accepted and compared case-insensitively.
    """

    roles = payload.get("roles") or []
    if isinstance(roles, str):
        roles = [roles]
    single = payload.get("role")
    if single:
        roles = [*roles, single]
    return {str(role).upper() for role in roles}


def require_admin(payload: dict = Depends(get_current_user)) -> int:
    """Allow only callers holding the administrator role; returns their id."""

    caller_id = get_current_user_id(payload)
    if settings.ADMIN_ROLE.upper() not in token_roles(payload):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Administrator role required",
        )
    return caller_id


__all__ = ["get_current_user", "get_current_user_id", "require_admin", "token_roles"]
