"""
Models Package

Exports the database models, the db instance, and the plain planning types
the engine computes over.
"""

from .base import db

from .catalog import CatalogProduct
from .cart import CartItem, PickupItem
from .mealplan import CalendarEntry
from .settings import Settings
from .planning import (
    Product, Catalog, SlotKey, HouseholdProfile, FreezerCapacity,
    CartLine, DeliveryPlan, CalendarDay, TimelinePoint,
)

__all__ = [
    'db',
    'CatalogProduct',
    'CartItem',
    'PickupItem',
    'CalendarEntry',
    'Settings',
    # Planning types
    'Product',
    'Catalog',
    'SlotKey',
    'HouseholdProfile',
    'FreezerCapacity',
    'CartLine',
    'DeliveryPlan',
    'CalendarDay',
    'TimelinePoint',
]
