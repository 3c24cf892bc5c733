# mentor_match/dependencies/auth_dependencies.py
from typing import Callable
from fastapi import Depends, HTTPException, status
from ..models import User, UserRole
from ..security import get_current_user

def create_role_dependency(role: UserRole) -> Callable:
    """
    Factory to create role-gate dependencies.
    Authentication runs first through get_current_user, so an unauthenticated
    caller always gets 401 before the role is looked at.
    """
    def dependency(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role != role.value:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. {role.value} role required",
            )
        return current_user

    return dependency

get_current_mentor = create_role_dependency(UserRole.MENTOR)
get_current_mentee = create_role_dependency(UserRole.MENTEE)
