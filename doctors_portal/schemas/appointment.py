from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

class AppointmentOptionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="_id")
    name: str
    slots: List[str] = []
    price: Optional[float] = None

class AppointmentSpecialty(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
