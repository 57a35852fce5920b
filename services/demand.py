"""
Demand Calculation Service

Converts family composition and weekly slot frequencies into annual weight
and cost targets.
"""

from dataclasses import dataclass, field
from typing import Dict

from constants import ADULT_FACTOR, CHILD_FACTOR, DAYS_PER_YEAR, TEEN_FACTOR, WEEKS_PER_YEAR
from models.planning import Product, SlotKey
from utils.errors import require
from utils.logging_utils import get_logger

logger = get_logger(__name__)


def non_negative(value):
    """Coerce to float and clamp at 0; unparseable input counts as 0."""
    try:
        result = float(value) if value else 0.0
    except (TypeError, ValueError):
        return 0.0
    return max(0.0, result)


def portions_per_meal(profile, teen_factor=None, child_factor=None):
    """Adult-equivalent portions served at one meal."""
    teen_factor = TEEN_FACTOR if teen_factor is None else teen_factor
    child_factor = CHILD_FACTOR if child_factor is None else child_factor
    return (non_negative(profile.adults) * ADULT_FACTOR
            + non_negative(profile.teens) * teen_factor
            + non_negative(profile.children) * child_factor)


def coverage_ratio(profile):
    """Fraction of the year the household cooks at home."""
    effective_days = max(0.0, DAYS_PER_YEAR - non_negative(profile.restaurant_frequency))
    return effective_days / DAYS_PER_YEAR


def annual_meals_for(weekly_frequency, profile):
    return non_negative(weekly_frequency) * WEEKS_PER_YEAR * coverage_ratio(profile)


def annual_grams_for(weekly_frequency, profile, teen_factor=None, child_factor=None):
    """Grams of protein one slot needs over a year."""
    portions = portions_per_meal(profile, teen_factor, child_factor)
    grams_per_person = non_negative(profile.grams_per_person)
    return annual_meals_for(weekly_frequency, profile) * portions * grams_per_person


def iter_active_slots(profile):
    """Yield (SlotKey, frequency) for every decodable slot with a positive frequency."""
    for key, frequency in profile.slot_frequencies.items():
        frequency = non_negative(frequency)
        if frequency <= 0:
            continue
        slot = SlotKey.decode(key)
        if slot is None:
            continue
        yield slot, frequency


@dataclass
class SlotDemand:
    """Annual need of one slot."""
    slot: SlotKey
    product: Product
    weekly_frequency: float
    annual_meals: float
    annual_kg: float
    annual_cost: float

    def to_dict(self):
        return {
            'slot': self.slot.encode(),
            'product_id': self.product.id,
            'weekly_frequency': self.weekly_frequency,
            'annual_meals': round(self.annual_meals, 2),
            'annual_kg': round(self.annual_kg, 3),
            'annual_cost': round(self.annual_cost, 2),
        }


@dataclass
class DemandResult:
    """Per-slot and total annual demand."""
    slots: Dict[str, SlotDemand] = field(default_factory=dict)
    total_kg: float = 0.0
    total_cost: float = 0.0
    total_meals: float = 0.0
    coverage_percent: float = 0.0

    @property
    def per_slot_kg(self):
        return {key: demand.annual_kg for key, demand in self.slots.items()}

    @property
    def per_slot_cost(self):
        return {key: demand.annual_cost for key, demand in self.slots.items()}

    def to_dict(self):
        return {
            'per_slot_kg': {k: round(v, 3) for k, v in self.per_slot_kg.items()},
            'per_slot_cost': {k: round(v, 2) for k, v in self.per_slot_cost.items()},
            'slots': [demand.to_dict() for demand in self.slots.values()],
            'total_kg': round(self.total_kg, 3),
            'total_cost': round(self.total_cost, 2),
            'total_meals': round(self.total_meals, 2),
            'coverage_percent': round(self.coverage_percent, 2),
        }


def calculate_demand(profile, catalog, teen_factor=None, child_factor=None):
    """
    Compute the annual weight and cost each active slot calls for.

    Cost is priced continuously (annual kg x price per kg of the selected
    product); the box-rounded cost is what build_purchase_plan returns.

    Args:
        profile: HouseholdProfile with slot frequencies and selections
        catalog: Catalog the slot selections refer to
        teen_factor: Optional override of the teen portion weight (custody factor)
        child_factor: Optional override of the child portion weight

    Returns:
        DemandResult. Slots without a selection, or whose product is no longer
        in the catalog, contribute nothing.
    """
    require(profile, 'profile')
    require(catalog, 'catalog')

    ratio = coverage_ratio(profile)
    result = DemandResult(coverage_percent=ratio * 100)

    for slot, frequency in iter_active_slots(profile):
        product = catalog.get(profile.selection_for(slot))
        if product is None:
            logger.debug("Slot %s has no catalog product, skipped", slot.encode())
            continue

        annual_meals = annual_meals_for(frequency, profile)
        annual_kg = annual_grams_for(frequency, profile, teen_factor, child_factor) / 1000
        annual_cost = annual_kg * product.price_per_kg

        result.slots[slot.encode()] = SlotDemand(
            slot=slot,
            product=product,
            weekly_frequency=frequency,
            annual_meals=annual_meals,
            annual_kg=annual_kg,
            annual_cost=annual_cost,
        )
        result.total_kg += annual_kg
        result.total_cost += annual_cost
        result.total_meals += annual_meals

    logger.debug("Demand: %d slots, %.1f kg, %.2f$ per year",
                 len(result.slots), result.total_kg, result.total_cost)
    return result
