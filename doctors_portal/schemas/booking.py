from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Dict, Optional

class BookingBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    email: str = Field(min_length=1)
    appointment_date: str = Field(alias="appointmentDate", min_length=1)
    treatment: str = Field(min_length=1)
    slot: str = Field(min_length=1)
    patient: Optional[str] = None
    phone: Optional[str] = None
    price: Optional[float] = None

class BookingCreate(BookingBase):
    """Booking request body; unknown fields are kept as extras."""

    @property
    def extras(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})

class BookingResponse(BookingBase):
    id: str = Field(alias="_id")
