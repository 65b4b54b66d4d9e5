from pydantic import BaseModel


class Credentials(BaseModel):
    # Optional so blank input surfaces as missing_fields rather than a 422.
    email: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    id: str
    email: str

    model_config = {"from_attributes": True}


class TokenResponse(BaseModel):
    token: str
    user: UserResponse


class SessionClaims(BaseModel):
    subject: str
    email: str | None = None
