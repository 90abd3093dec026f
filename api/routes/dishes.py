"""
Dish routes - the dish collection and single dishes.
Reads are open to any origin; writes require an admin and a whitelisted origin.
"""

from fastapi import APIRouter, Body, Depends, Response
from typing import List
import logging

from api.cors import cors, cors_with_options
from api.dependencies import get_dish_service
from api.security import verify_admin
from app.exceptions import MethodNotSupportedError
from domain.mappers import DishMapper
from domain.schemas import (
    AuthenticatedUser,
    DeleteAllResponse,
    DishCreate,
    DishResponse,
    DishUpdate,
)
from services import DishService

router = APIRouter(prefix="/dishes", tags=["Dishes"])
logger = logging.getLogger("dishes.api.dishes")


@router.options("", dependencies=[Depends(cors_with_options)])
def preflight_dishes():
    return Response(status_code=200)


@router.get("", response_model=List[DishResponse], dependencies=[Depends(cors)])
def list_dishes(service: DishService = Depends(get_dish_service)):
    """Return all dishes with comment authors expanded."""
    return [DishMapper.to_response(d) for d in service.list()]


@router.post("", response_model=DishResponse, dependencies=[Depends(cors_with_options)])
def create_dish(
    payload: DishCreate,
    user: AuthenticatedUser = Depends(verify_admin),
    service: DishService = Depends(get_dish_service),
):
    """Create a dish from the request body (admin only)."""
    return DishMapper.to_response(service.create(payload))


@router.put("", dependencies=[Depends(cors_with_options), Depends(verify_admin)])
def replace_dishes():
    raise MethodNotSupportedError("PUT", "/dishes")


@router.delete(
    "", response_model=DeleteAllResponse, dependencies=[Depends(cors_with_options)]
)
def delete_dishes(
    user: AuthenticatedUser = Depends(verify_admin),
    service: DishService = Depends(get_dish_service),
):
    """Remove every dish (admin only)."""
    logger.info(f"delete_all_dishes requested_by={user.id}")
    return service.delete_all()


@router.options("/{dish_id}", dependencies=[Depends(cors_with_options)])
def preflight_dish(dish_id: str):
    return Response(status_code=200)


@router.get("/{dish_id}", response_model=DishResponse, dependencies=[Depends(cors)])
def get_dish(dish_id: str, service: DishService = Depends(get_dish_service)):
    """Return one dish with comment authors expanded; 404 when it does not exist."""
    return DishMapper.to_response(service.get(dish_id))


@router.post("/{dish_id}", dependencies=[Depends(cors_with_options), Depends(verify_admin)])
def post_to_dish(dish_id: str):
    raise MethodNotSupportedError("POST", f"/dishes/{dish_id}")


@router.put("/{dish_id}", response_model=DishResponse, dependencies=[Depends(cors_with_options)])
def update_dish(
    dish_id: str,
    payload: DishUpdate = Body(...),
    user: AuthenticatedUser = Depends(verify_admin),
    service: DishService = Depends(get_dish_service),
):
    """Merge the provided fields into the dish (admin only)."""
    return DishMapper.to_response(service.update(dish_id, payload))


@router.delete("/{dish_id}", response_model=DishResponse, dependencies=[Depends(cors_with_options)])
def delete_dish(
    dish_id: str,
    user: AuthenticatedUser = Depends(verify_admin),
    service: DishService = Depends(get_dish_service),
):
    """Remove one dish and return it (admin only)."""
    return DishMapper.to_response(service.delete(dish_id))
