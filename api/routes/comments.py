"""
Comment routes - comments embedded in a dish.
Any authenticated user may comment; only the author may change or remove a comment.
"""

from fastapi import APIRouter, Body, Depends, Response
from typing import List
import logging

from api.cors import cors, cors_with_options
from api.dependencies import get_comment_service
from api.security import verify_admin, verify_user
from app.exceptions import MethodNotSupportedError
from domain.mappers import DishMapper
from domain.schemas import (
    AuthenticatedUser,
    CommentCreate,
    CommentResponse,
    CommentUpdate,
    DishResponse,
)
from services import CommentService

router = APIRouter(prefix="/dishes/{dish_id}/comments", tags=["Comments"])
logger = logging.getLogger("dishes.api.comments")


@router.options("", dependencies=[Depends(cors_with_options)])
def preflight_comments(dish_id: str):
    return Response(status_code=200)


@router.get("", response_model=List[CommentResponse], dependencies=[Depends(cors)])
def list_comments(dish_id: str, service: CommentService = Depends(get_comment_service)):
    """Return the dish's comments with authors expanded."""
    return [DishMapper.comment_to_response(c) for c in service.list_comments(dish_id)]


@router.post("", response_model=DishResponse, dependencies=[Depends(cors_with_options)])
def add_comment(
    dish_id: str,
    payload: CommentCreate,
    user: AuthenticatedUser = Depends(verify_user),
    service: CommentService = Depends(get_comment_service),
):
    """Append a comment authored by the requester; returns the whole dish."""
    return DishMapper.to_response(service.add_comment(dish_id, payload, user))


@router.put("", dependencies=[Depends(cors_with_options), Depends(verify_user)])
def replace_comments(dish_id: str):
    raise MethodNotSupportedError("PUT", f"/dishes/{dish_id}/comments")


@router.delete("", response_model=DishResponse, dependencies=[Depends(cors_with_options)])
def delete_comments(
    dish_id: str,
    user: AuthenticatedUser = Depends(verify_admin),
    service: CommentService = Depends(get_comment_service),
):
    """Remove every comment from the dish (admin only)."""
    return DishMapper.to_response(service.delete_all_comments(dish_id))


@router.options("/{comment_id}", dependencies=[Depends(cors_with_options)])
def preflight_comment(dish_id: str, comment_id: str):
    return Response(status_code=200)


@router.get("/{comment_id}", response_model=CommentResponse, dependencies=[Depends(cors)])
def get_comment(
    dish_id: str,
    comment_id: str,
    service: CommentService = Depends(get_comment_service),
):
    return DishMapper.comment_to_response(service.get_comment(dish_id, comment_id))


@router.post("/{comment_id}", dependencies=[Depends(cors_with_options), Depends(verify_user)])
def post_to_comment(dish_id: str, comment_id: str):
    raise MethodNotSupportedError("POST", f"/dishes/{dish_id}/comments/{comment_id}")


@router.put("/{comment_id}", response_model=DishResponse, dependencies=[Depends(cors_with_options)])
def update_comment(
    dish_id: str,
    comment_id: str,
    payload: CommentUpdate = Body(...),
    user: AuthenticatedUser = Depends(verify_user),
    service: CommentService = Depends(get_comment_service),
):
    """Change rating and/or text of the requester's own comment."""
    return DishMapper.to_response(
        service.update_comment(dish_id, comment_id, payload, user)
    )


@router.delete("/{comment_id}", response_model=DishResponse, dependencies=[Depends(cors_with_options)])
def delete_comment(
    dish_id: str,
    comment_id: str,
    user: AuthenticatedUser = Depends(verify_user),
    service: CommentService = Depends(get_comment_service),
):
    """Remove the requester's own comment."""
    return DishMapper.to_response(service.delete_comment(dish_id, comment_id, user))
