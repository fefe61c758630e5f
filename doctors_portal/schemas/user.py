from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional

from ..models.user import RESERVED_FIELDS

class UserCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: str = Field(min_length=1)
    name: Optional[str] = None

    @property
    def extras(self) -> Dict[str, Any]:
        # The role is only granted through admin promotion
        return {
            key: value for key, value in (self.model_extra or {}).items()
            if key not in RESERVED_FIELDS
        }

class UserResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="_id")
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None

class AdminStatus(BaseModel):
    isAdmin: bool
