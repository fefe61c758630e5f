from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional

class DoctorBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str = Field(min_length=1)
    specialty: str = Field(min_length=1)
    email: Optional[str] = None
    image: Optional[str] = None
    slots: Optional[List[str]] = None

class DoctorCreate(DoctorBase):
    @property
    def extras(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})

class DoctorResponse(DoctorBase):
    id: str = Field(alias="_id")
