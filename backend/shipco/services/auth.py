"""Single-admin credential store: first registration wins, then registration closes."""

from __future__ import annotations

import logging

import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from shipco.api.deps import create_access_token
from shipco.config import Settings
from shipco.errors import InvalidCredentials, MissingFields, RegistrationClosed
from shipco.models.credential import ADMIN_ROLE, ADMIN_SLOT, Credential
from shipco.schemas.auth import Credentials

logger = logging.getLogger(__name__)


def _password_bytes(password: str) -> bytes:
    # bcrypt only looks at the first 72 bytes and newer releases reject longer input.
    return password.encode("utf-8")[:72]


def hash_password(password: str, rounds: int) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError as e:
        logger.error("Password verification failed: %s", e)
        return False


def _require(dto: Credentials) -> tuple[str, str]:
    email = (dto.email or "").strip().lower()
    if not email or not dto.password:
        raise MissingFields("email and password are required")
    return email, dto.password


def count_credentials(db: Session) -> int:
    return db.query(Credential).count()


def get_credential_by_email(db: Session, email: str) -> Credential | None:
    normalized = email.strip().lower()
    return db.query(Credential).filter(Credential.email == normalized).first()


def register_admin(
    db: Session, dto: Credentials, settings: Settings
) -> tuple[Credential, str]:
    email, password = _require(dto)
    if count_credentials(db) > 0:
        raise RegistrationClosed("An administrator is already registered.")
    credential = Credential(
        email=email,
        password=hash_password(password, settings.bcrypt_rounds),
        role=ADMIN_ROLE,
        slot=ADMIN_SLOT,
    )
    db.add(credential)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise RegistrationClosed("An administrator is already registered.")
    db.refresh(credential)
    logger.info("Registered administrator %s", credential.email)
    token = create_access_token(credential.id, credential.email, settings)
    return credential, token


def login_admin(
    db: Session, dto: Credentials, settings: Settings
) -> tuple[Credential, str]:
    email, password = _require(dto)
    credential = get_credential_by_email(db, email)
    if not credential or not verify_password(password, credential.password):
        logger.warning("Failed login for %s", email)
        raise InvalidCredentials()
    token = create_access_token(credential.id, credential.email, settings)
    return credential, token
