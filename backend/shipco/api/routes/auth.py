from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shipco.api.deps import get_settings
from shipco.config import Settings
from shipco.database import get_db
from shipco.schemas.auth import Credentials, TokenResponse, UserResponse
from shipco.services.auth import login_admin, register_admin

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=TokenResponse)
def register(
    dto: Credentials | None = None,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    credential, token = register_admin(db, dto or Credentials(), settings)
    return TokenResponse(token=token, user=UserResponse.model_validate(credential))


@router.post("/login", response_model=TokenResponse)
def login(
    dto: Credentials | None = None,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    credential, token = login_admin(db, dto or Credentials(), settings)
    return TokenResponse(token=token, user=UserResponse.model_validate(credential))
