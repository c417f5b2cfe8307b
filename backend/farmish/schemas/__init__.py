"""Schema exports."""

from farmish.schemas.animal import AnimalCreate, AnimalList, AnimalRead, AnimalUpdate
from farmish.schemas.catalog import (
    DrugCreate,
    DrugList,
    DrugRead,
    DrugUpdate,
    FoodCreate,
    FoodList,
    FoodRead,
    FoodUpdate,
)
from farmish.schemas.delivery import (
    DeliveryCreate,
    DeliveryList,
    DeliveryRead,
    DeliveryReceipt,
    DeliveryUpdate,
)
from farmish.schemas.feeding import (
    EatablesInfoCreate,
    EatablesInfoUpdate,
    GivenEatablesCreate,
    GivenEatablesUpdate,
    LedgerEntryRead,
    ScheduleAssignmentList,
    ScheduleAssignmentRead,
    Slot,
    SlotDecodeError,
)
from farmish.schemas.product import (
    AnimalProductCreate,
    AnimalProductList,
    AnimalProductRead,
    AnimalProductUpdate,
    ProductCreate,
    ProductList,
    ProductRead,
    ProductUpdate,
)

__all__ = [
    "AnimalCreate",
    "AnimalList",
    "AnimalRead",
    "AnimalUpdate",
    "DeliveryCreate",
    "DeliveryList",
    "DeliveryRead",
    "DeliveryReceipt",
    "DeliveryUpdate",
    "DrugCreate",
    "DrugList",
    "DrugRead",
    "DrugUpdate",
    "EatablesInfoCreate",
    "EatablesInfoUpdate",
    "FoodCreate",
    "FoodList",
    "FoodRead",
    "FoodUpdate",
    "GivenEatablesCreate",
    "GivenEatablesUpdate",
    "LedgerEntryRead",
    "ScheduleAssignmentList",
    "ScheduleAssignmentRead",
    "Slot",
    "SlotDecodeError",
    "AnimalProductCreate",
    "AnimalProductList",
    "AnimalProductRead",
    "AnimalProductUpdate",
    "ProductCreate",
    "ProductList",
    "ProductRead",
    "ProductUpdate",
]
