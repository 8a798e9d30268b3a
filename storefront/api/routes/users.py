"""User Routes — create, list, delete.

Invariants:
    - POST validates name/email/password via UserCreate (400 on failure)
    - Duplicate email surfaces as UniqueConstraintError (409)
    - DELETE returns 204 with an empty body; cascade handled by the database
"""

from fastapi import APIRouter, Depends, Response, status

from storefront.api.dependencies import IdPath, get_user_repository
from storefront.core.domain_types import UserId
from storefront.core.repository_protocols import UserRepository
from storefront.schemas.user import UserCreate, UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "", response_model=UserRead, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate, users: UserRepository = Depends(get_user_repository),
):
    """Create a user."""
    return await users.create(body.name, body.email, body.password)


@router.get("", response_model=list[UserRead])
async def list_users(users: UserRepository = Depends(get_user_repository)):
    """List all users by ascending id."""
    return await users.list_all()


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: IdPath, users: UserRepository = Depends(get_user_repository),
):
    """Delete a user together with their stores and products."""
    await users.delete(UserId(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
