from typing import Any, Dict, List
import logging

from app.exceptions import ServiceValidationError, dish_not_found
from domain.models import is_field_path
from domain.schemas import DishCreate, DishUpdate
from repositories import DishRepository

logger = logging.getLogger("dishes.service.dishes")


def _plain_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Refuse dotted or operator-like names; only top-level dish fields are writable."""
    paths = sorted(k for k in fields if is_field_path(k))
    if paths:
        raise ServiceValidationError(
            f"Invalid field name(s): {', '.join(paths)}",
            details={"fields": paths},
        )
    return fields


class DishService:
    """Business logic for the dish collection and single dishes"""

    def __init__(self, repository: DishRepository):
        self.repository = repository

    def list(self) -> List[Dict[str, Any]]:
        """All dishes, comment authors expanded. No pagination or filtering."""
        return self.repository.get_all_expanded()

    def create(self, payload: DishCreate) -> Dict[str, Any]:
        dish = self.repository.create(_plain_fields(payload.to_fields()))
        logger.info(f"dish_created dish_id={dish['_id']} name={dish.get('name')!r}")
        return dish

    def delete_all(self) -> Dict[str, Any]:
        return self.repository.delete_all()

    def get(self, dish_id: str) -> Dict[str, Any]:
        dish = self.repository.get_expanded(dish_id)
        if dish is None:
            logger.warning(f"dish_not_found dish_id={dish_id}")
            raise dish_not_found(dish_id)
        return dish

    def update(self, dish_id: str, payload: DishUpdate) -> Dict[str, Any]:
        """Merge the provided fields into the dish and return it with authors expanded"""
        fields = _plain_fields(payload.to_fields())
        if not fields:
            return self.get(dish_id)
        dish = self.repository.update_fields(dish_id, fields)
        if dish is None:
            logger.warning(f"dish_not_found dish_id={dish_id}")
            raise dish_not_found(dish_id)
        logger.info(f"dish_updated dish_id={dish_id} fields={sorted(fields)}")
        return self.repository.expand_authors([dish])[0]

    def delete(self, dish_id: str) -> Dict[str, Any]:
        dish = self.repository.delete(dish_id)
        if dish is None:
            logger.warning(f"dish_not_found dish_id={dish_id}")
            raise dish_not_found(dish_id)
        logger.info(f"dish_deleted dish_id={dish_id}")
        return dish
