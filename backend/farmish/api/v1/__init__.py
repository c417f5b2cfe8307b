"""Versioned API router."""

from fastapi import APIRouter

from farmish.core.config import get_settings

from . import (
    animal_products,
    animals,
    auth,
    deliveries,
    drugs,
    feeding,
    foods,
    health,
    products,
)

_DEFAULT_RATE_DEP = auth.rate_dependency(
    auth.parse_rate(get_settings().rate_limit_default, fallback=(100, 60))
)

router = APIRouter(dependencies=[_DEFAULT_RATE_DEP])
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
# Schedule, ledger and yield routes share the /animals prefix and must match first.
router.include_router(feeding.router, tags=["feeding"])
router.include_router(animal_products.router, tags=["animal-products"])
router.include_router(animals.router, prefix="/animals", tags=["animals"])
router.include_router(foods.router, prefix="/foods", tags=["foods"])
router.include_router(drugs.router, prefix="/drugs", tags=["drugs"])
router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(deliveries.router, prefix="/deliveries", tags=["deliveries"])

__all__ = ["router"]
