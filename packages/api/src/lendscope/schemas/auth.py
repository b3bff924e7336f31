# This project was developed with assistance from AI tools.
"""Authentication and authorization schemas."""

from lendscope_db.enums import UserRole
from pydantic import BaseModel, ConfigDict


class UserContext(BaseModel):
    """Injected by auth middleware into every authenticated request."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    role: UserRole
    email: str = ""
    name: str = ""


class TokenPayload(BaseModel):
    """Decoded JWT claims issued by the identity provider."""

    sub: str
    role: str = UserRole.USER.value
    email: str = ""
    name: str = ""
