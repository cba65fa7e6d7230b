"""Current-user endpoint. Sign-in itself is handled upstream."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from swagsuite.core.deps import get_current_user_id
from swagsuite.core.response import DataResponse
from swagsuite.db.base import get_db
from swagsuite.schemas.user import UserOut
from swagsuite.services.user import UserService

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.get("/user", response_model=DataResponse[UserOut])
async def get_auth_user(
    session: AsyncSession = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    user = await UserService(session).get_user(user_id)
    return {"data": UserOut.model_validate(user)}
