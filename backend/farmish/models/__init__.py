"""ORM models package export."""

from farmish.models.animal import Animal, AnimalGender
from farmish.models.catalog import CATALOG_MODELS, Drug, EatableCategory, Food
from farmish.models.delivery import Delivery
from farmish.models.feeding import AnimalEatableInfo, AnimalGivenEatable
from farmish.models.product import AnimalProduct, Product
from farmish.models.user import User, UserRole, UserStatus

__all__ = [
    "Animal",
    "AnimalGender",
    "AnimalEatableInfo",
    "AnimalGivenEatable",
    "AnimalProduct",
    "CATALOG_MODELS",
    "Delivery",
    "Drug",
    "EatableCategory",
    "Food",
    "Product",
    "User",
    "UserRole",
    "UserStatus",
]
