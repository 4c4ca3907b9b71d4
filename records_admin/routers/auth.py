from fastapi import APIRouter, Depends, HTTPException, status

from records_admin.core.deps import get_store
from records_admin.core.security import authenticate
from records_admin.db.store import RecordStore
from records_admin.schemas.auth import LoginRequest, LoginResponse

router = APIRouter()


@router.post(
    "/login",
    response_model=LoginResponse,
    response_model_exclude_none=True,
    responses={
        400: {"description": "Username and password are required"},
        401: {"description": "Invalid credentials"},
    },
)
def login(payload: LoginRequest, store: RecordStore = Depends(get_store)):
    result = authenticate(store, payload.username, payload.password)
    if not result:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    return {
        "role": result.role.value,
        "userId": result.user_id,
        "userName": result.user_name,
        "message": "Login successful",
    }
