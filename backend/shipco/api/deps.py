from datetime import datetime, timedelta, timezone
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from shipco.config import Settings
from shipco.errors import InvalidToken, MissingToken
from shipco.schemas.auth import SessionClaims

security = HTTPBearer(auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def create_access_token(credential_id: str, email: str, settings: Settings) -> str:
    expire = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expire_days)
    to_encode = {"sub": str(credential_id), "email": email, "exp": expire}
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: Settings) -> SessionClaims:
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
    except JWTError:
        raise InvalidToken()
    subject = payload.get("sub")
    if not subject:
        raise InvalidToken()
    return SessionClaims(subject=subject, email=payload.get("email"))


async def get_current_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SessionClaims:
    if not credentials:
        raise MissingToken()
    return decode_token(credentials.credentials, settings)
