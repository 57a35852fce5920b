"""
Purchase Plan Service

Turns annual weight targets into whole boxes per product, split across the
four yearly deliveries.
"""

import math
from dataclasses import dataclass, field
from typing import Dict

from constants import DELIVERY_COUNT, DELIVERY_INDEXES, MIN_BOX_FRACTION, SOURCE_OPTIMIZED
from models.planning import DeliveryPlan
from utils.errors import require
from utils.logging_utils import get_logger
from .cart import add_to_plan
from .demand import annual_grams_for, iter_active_slots

logger = get_logger(__name__)


def box_count_for(annual_grams, package_weight_grams):
    """
    Whole boxes to buy for an annual need.

    Floors the box count, except that a need above 0.4 of a single box still
    buys one box.
    """
    if package_weight_grams <= 0 or annual_grams <= 0:
        return 0
    exact = annual_grams / package_weight_grams
    boxes = math.floor(exact)
    if boxes == 0 and exact > MIN_BOX_FRACTION:
        return 1
    return boxes


def split_across_deliveries(box_count):
    """Spread boxes evenly; deliveries 1..remainder get one extra."""
    base, remainder = divmod(int(box_count), DELIVERY_COUNT)
    return {index: base + (1 if position < remainder else 0)
            for position, index in enumerate(DELIVERY_INDEXES)}


@dataclass
class PurchasePlanResult:
    plan: DeliveryPlan = field(default_factory=DeliveryPlan)
    total_cost: float = 0.0
    # slot key -> boxes bought for that slot
    box_counts: Dict[str, int] = field(default_factory=dict)

    def to_dict(self):
        return {
            'cart': self.plan.to_records(),
            'total_cost': round(self.total_cost, 2),
            'box_counts': dict(self.box_counts),
        }


def build_purchase_plan(profile, catalog, teen_factor=None, child_factor=None):
    """
    Build the yearly delivery plan for a household.

    Args:
        profile: HouseholdProfile with slot frequencies and selections
        catalog: Catalog the selections refer to
        teen_factor: Optional teen portion weight override
        child_factor: Optional child portion weight override

    Returns:
        PurchasePlanResult. Slots whose product is missing, unavailable or has
        no package weight are skipped.
    """
    require(profile, 'profile')
    require(catalog, 'catalog')

    result = PurchasePlanResult()
    plan = DeliveryPlan()

    for slot, frequency in iter_active_slots(profile):
        product = catalog.get(profile.selection_for(slot))
        if product is None or not product.is_available:
            logger.debug("Slot %s skipped: product missing or unavailable", slot.encode())
            continue
        if product.package_weight_grams <= 0:
            logger.debug("Slot %s skipped: %s has no package weight", slot.encode(), product.id)
            continue

        grams = annual_grams_for(frequency, profile, teen_factor, child_factor)
        boxes = box_count_for(grams, product.package_weight_grams)
        if boxes == 0:
            continue

        plan = add_to_plan(plan, product, split_across_deliveries(boxes), SOURCE_OPTIMIZED)
        result.box_counts[slot.encode()] = boxes
        result.total_cost += boxes * product.effective_price

    result.plan = plan
    logger.info("Purchase plan built: %d lines, %d boxes, %.2f$",
                len(plan.lines), plan.total_quantity, result.total_cost)
    return result
