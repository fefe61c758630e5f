from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Union

from ...core.database import get_db
from ...api.deps import get_admin_user
from ...schemas.common import InsertResult, Rejected, UpdateResult
from ...schemas.user import AdminStatus, UserCreate, UserResponse
from ...services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])

@router.get(
    "",
    response_model=List[UserResponse],
    response_model_exclude_none=True,
    dependencies=[Depends(get_admin_user)]
)
def list_users(db: Session = Depends(get_db)):
    """List all users (admin only)."""
    return UserService(db).list_users()

@router.post("", response_model=Union[InsertResult, Rejected])
def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    """Register a user record."""
    return UserService(db).create_user(user_data)

@router.get("/admin/{email}", response_model=AdminStatus)
def check_admin(email: str, db: Session = Depends(get_db)):
    """Report whether ``email`` belongs to an admin."""
    return AdminStatus(isAdmin=UserService(db).is_admin(email))

@router.put(
    "/admin/{user_id}",
    response_model=UpdateResult,
    dependencies=[Depends(get_admin_user)]
)
def promote_user(user_id: str, db: Session = Depends(get_db)):
    """Grant the admin role (admin only); unknown ids are created."""
    return UserService(db).promote_to_admin(user_id)
