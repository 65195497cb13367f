"""
services/user_service.py
-------------------------
Business logic for listing users together with their employments.

Users and employments are read with one query each and joined in memory
on `Employment.user_id`. Employments that reference a user outside the
result set are dropped.
"""

import asyncio
from collections import defaultdict
from typing import Iterable

from starlette.concurrency import run_in_threadpool

from models.employment import Employment
from models.user import User
from models.views import EmploymentView, UserView, UserWithEmployments
from repositories.employment_repo import EmploymentRepository
from repositories.user_repo import UserRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def group_by_user(employments: Iterable[Employment]) -> dict[int, list[Employment]]:
    """
    Group employments by owning user id in a single pass.

    Within each group, employments keep the order they were given in.
    """
    groups: dict[int, list[Employment]] = defaultdict(list)
    for employment in employments:
        groups[employment.user_id].append(employment)
    return dict(groups)


def aggregate_users(
    users: Iterable[User], employments: Iterable[Employment]
) -> list[UserWithEmployments]:
    """
    Attach each user's employments to it, preserving user order.

    Args:
        users: Users in presentation order.
        employments: Every employment; orphans are ignored.

    Returns:
        One UserWithEmployments per user. Users without employments get an
        empty list.
    """
    groups = group_by_user(employments)
    return [
        UserWithEmployments(
            user=UserView.from_user(user),
            employments=[EmploymentView.from_employment(e) for e in groups.get(user.id, [])],
        )
        for user in users
    ]


class UserService:
    """Reads users and employments and assembles the nested listing."""

    def __init__(self, user_repo: UserRepository, employment_repo: EmploymentRepository):
        self.user_repo = user_repo
        self.employment_repo = employment_repo

    async def list_users_with_employments(self) -> list[UserWithEmployments]:
        """
        Run both reads concurrently, then join them.

        Either read failing fails the whole call; nothing is aggregated from
        a partial result.

        Raises:
            DataAccessError: If either query fails.
        """
        users, employments = await asyncio.gather(
            run_in_threadpool(self.user_repo.fetch_all_users),
            run_in_threadpool(self.employment_repo.fetch_all_employments),
        )
        result = aggregate_users(users, employments)
        attached = sum(len(entry.employments) for entry in result)
        if attached < len(employments):
            logger.info(f"Skipped {len(employments) - attached} orphan employments")
        logger.info(f"Listed {len(result)} users with {attached} employments")
        return result
