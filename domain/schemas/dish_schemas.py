"""Pydantic schemas for dish and comment requests and responses."""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from domain.models import is_reserved_field


class DishCreate(BaseModel):
    """Payload for POST /dishes. Unknown descriptive fields are stored as-is."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    image: Optional[str] = None
    category: Optional[str] = None
    label: str = ""
    price: float = Field(default=0, ge=0)
    featured: bool = False

    @field_validator("name", mode="before")
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    def to_fields(self) -> Dict[str, Any]:
        data = self.model_dump()
        return {k: v for k, v in data.items() if not is_reserved_field(k)}


class DishUpdate(BaseModel):
    """Partial payload for PUT /dishes/{dish_id}; only provided fields are merged."""

    model_config = ConfigDict(extra="allow")

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, min_length=1)
    image: Optional[str] = None
    category: Optional[str] = None
    label: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0)
    featured: Optional[bool] = None

    def to_fields(self) -> Dict[str, Any]:
        data = self.model_dump(exclude_unset=True, exclude_none=True)
        return {k: v for k, v in data.items() if not is_reserved_field(k)}


class CommentCreate(BaseModel):
    """Payload for POST /dishes/{dish_id}/comments.

    Any ``author`` sent by the client is ignored; the requester becomes the author.
    """

    model_config = ConfigDict(extra="ignore")

    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=1)


class CommentUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    rating: Optional[int] = Field(default=None, ge=1, le=5)
    comment: Optional[str] = Field(default=None, min_length=1)

    def to_fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class UserSummary(BaseModel):
    """Public fields of a comment author."""

    id: str
    username: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    admin: bool = False


class CommentResponse(BaseModel):
    id: str
    rating: int
    comment: str
    author: Union[UserSummary, str, None] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DishResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    description: str
    image: Optional[str] = None
    category: Optional[str] = None
    label: str = ""
    price: float = 0
    featured: bool = False
    comments: List[CommentResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class DeleteAllResponse(BaseModel):
    """Store acknowledgment for bulk removal."""

    acknowledged: bool
    deleted_count: int
