from typing import Optional

from pydantic import BaseModel


class AuthenticatedUser(BaseModel):
    """Identity produced by bearer-token verification."""

    id: str
    username: Optional[str] = None
    admin: bool = False
