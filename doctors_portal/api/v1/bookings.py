from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional, Union

from ...core.database import get_db
from ...core.security import AuthorizationError, TokenPayload
from ...api.deps import get_current_identity
from ...schemas.booking import BookingCreate, BookingResponse
from ...schemas.common import InsertResult, Rejected
from ...services.booking_service import BookingService

router = APIRouter(prefix="/bookings", tags=["Bookings"])

@router.get("", response_model=List[BookingResponse], response_model_exclude_none=True)
def list_bookings(
    email: Optional[str] = None,
    identity: TokenPayload = Depends(get_current_identity),
    db: Session = Depends(get_db)
):
    """List the caller's own bookings."""
    if email != identity.email:
        raise AuthorizationError()

    return BookingService(db).list_bookings(email)

@router.post("", response_model=Union[InsertResult, Rejected])
def create_booking(
    booking: BookingCreate,
    db: Session = Depends(get_db)
):
    """Book a slot; a second booking of the same treatment on the same day is refused."""
    return BookingService(db).create_booking(booking)
