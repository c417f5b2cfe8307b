"""Service layer exports."""
from farmish.services import (
    animal_service,
    product_service,
    animal_product_service,
    catalog_service,
    delivery_service,
    eatables_service,
    feeding_service,
    hunger_service,
    user_service,
)

__all__ = [
    "animal_product_service",
    "animal_service",
    "catalog_service",
    "delivery_service",
    "eatables_service",
    "feeding_service",
    "hunger_service",
    "product_service",
    "user_service",
]
