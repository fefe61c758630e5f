from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...core.security import AccessToken, UnknownUserError
from ...services.auth_service import AuthService

router = APIRouter(tags=["Authentication"])

@router.get(
    "/jwt",
    response_model=AccessToken,
    responses={403: {"model": AccessToken}}
)
def issue_token(email: str, db: Session = Depends(get_db)):
    """Issue an access token for a registered email."""
    try:
        token = AuthService(db).issue_access_token(email)
    except UnknownUserError:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"accessToken": ""}
        )

    return AccessToken(accessToken=token)
