from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from accounts.dependencies import get_current_user_id, get_user_service
from accounts.schemas import MembershipOut, ProjectOut, SwitchProjectIn, UserOut
from accounts.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserOut)
def me(user_id: str = Depends(get_current_user_id), users: UserService = Depends(get_user_service)):
    return UserOut.from_entity(users.get(user_id))


@router.get("/lookup", response_model=UserOut)
def lookup(
    value: str,
    _viewer_id: str = Depends(get_current_user_id),
    users: UserService = Depends(get_user_service),
):
    user = users.get_by_username_or_email(value.strip())
    if not user:
        raise HTTPException(404, "User not found")
    return UserOut.from_entity(user)


@router.get("/me/project", response_model=ProjectOut)
def current_project(user_id: str = Depends(get_current_user_id), users: UserService = Depends(get_user_service)):
    project = users.get_current_project_or_fail(user_id)
    return ProjectOut(id=project.id, name=project.name)


@router.put("/me/project", status_code=204)
def switch_project(
    body: SwitchProjectIn,
    user_id: str = Depends(get_current_user_id),
    users: UserService = Depends(get_user_service),
):
    users.switch_project(body.project_id, user_id)
    return Response(status_code=204)


@router.get("/me/projects/{project_id}/membership", response_model=MembershipOut)
def project_membership(
    project_id: str,
    user_id: str = Depends(get_current_user_id),
    users: UserService = Depends(get_user_service),
):
    return MembershipOut(is_member=users.is_member_of_project(project_id, user_id))


@router.get("/me/groups/{group_id}/membership", response_model=MembershipOut)
def group_membership(
    group_id: str,
    user_id: str = Depends(get_current_user_id),
    users: UserService = Depends(get_user_service),
):
    return MembershipOut(is_member=users.is_member_of_group(group_id, user_id))
