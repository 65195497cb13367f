"""
handlers/user_handler.py
-------------------------
HTTP endpoint for the user listing.
"""

from fastapi import APIRouter, Depends, Request

from db.connection import Database
from models.views import UserWithEmployments
from repositories.employment_repo import EmploymentRepository
from repositories.user_repo import UserRepository
from services.user_service import UserService

router = APIRouter(prefix="/api")


def get_database(request: Request) -> Database:
    """The pool opened at startup and stored on the application state."""
    return request.app.state.db


def get_user_service(db: Database = Depends(get_database)) -> UserService:
    return UserService(UserRepository(db), EmploymentRepository(db))


@router.get("/users", response_model=list[UserWithEmployments])
async def list_users(service: UserService = Depends(get_user_service)):
    """
    List every user with the employments that belong to it.

    Returns:
        list: `{"user": {...}, "employments": [...]}` per user, in the order
        the users query returned them.
    """
    return await service.list_users_with_employments()
