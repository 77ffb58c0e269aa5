from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import Unauthenticated
from app.core.security import (
    verify_password,
    create_access_token,
    get_current_user
)
from app.models.profile_db.profile_crud import get_profile_by_user_id
from app.models.user_db.user_db import User
from app.models.user_db.user_db_crud import get_or_create_user, set_user_password
from app.schemas.auth.auth_base import EnterRequest, EnterResponse, MeOut, PasswordUpdate, UserOut

auth_router = APIRouter(prefix="/auth", tags=["Auth"])


@auth_router.post("/enter", response_model=EnterResponse)
def enter(payload: EnterRequest, db: Session = Depends(get_db)):
    """Sign in by student ID, creating the account on first entry."""
    user, is_new_user = get_or_create_user(db, payload.student_id, payload.password)

    if not is_new_user and user.hashed_password:
        if not payload.password or not verify_password(payload.password, user.hashed_password):
            raise Unauthenticated("학번 또는 비밀번호가 올바르지 않습니다.")

    token = create_access_token({"sub": user.student_id})
    return EnterResponse(
        token=token,
        user=UserOut.model_validate(user),
        is_new_user=is_new_user,
        has_profile=get_profile_by_user_id(db, user.id) is not None,
    )


@auth_router.get("/me", response_model=MeOut)
def get_me(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return MeOut(
        user=UserOut.model_validate(current_user),
        has_profile=get_profile_by_user_id(db, current_user.id) is not None,
    )


@auth_router.put("/password", response_model=UserOut)
def change_password(
    data: PasswordUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return set_user_password(db, current_user, data.password)
