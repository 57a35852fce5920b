"""
Freezer Timeline Service

Simulates freezer volume over one year of deliveries and moves overflowing
boxes to the in-store pickup list.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List

from constants import (
    CU_FT_PER_PORTION, DAYS_PER_YEAR, DELIVERY_INDEXES, OVERFLOW_TOLERANCE, RESTOCK_THRESHOLD,
)
from models.planning import DeliveryPlan, Product, TimelinePoint
from utils.errors import PlanningInputError, require
from utils.logging_utils import get_logger
from .cart import apply_offload
from .demand import portions_per_meal

logger = get_logger(__name__)


def plan_volume(plan):
    """Freezer volume (cubic feet) of every box in the plan."""
    return sum(line.total_volume_cu_ft for line in plan.lines)


def delivery_volume(plan, delivery_index):
    return sum(line.quantities.get(delivery_index, 0) * line.product.package_volume_cu_ft
               for line in plan.lines)


def required_space_for_family(profile, teen_factor=None, child_factor=None):
    """Rule-of-thumb freezer space a household needs (2.5 cu ft per portion)."""
    require(profile, 'profile')
    return portions_per_meal(profile, teen_factor, child_factor) * CU_FT_PER_PORTION


@dataclass
class FreezerSimulation:
    """Result of one freezer simulation run."""
    timeline: List[TimelinePoint] = field(default_factory=list)
    pickup_list: List[Product] = field(default_factory=list)
    max_volume: float = 0.0
    # product id -> {delivery index: units moved to pickup}
    offload: Dict[str, Dict[int, int]] = field(default_factory=dict)
    plan: DeliveryPlan = field(default_factory=DeliveryPlan)

    @property
    def pickup_volume(self):
        return sum(product.package_volume_cu_ft for product in self.pickup_list)

    def to_dict(self):
        return {
            'timeline': [point.to_dict() for point in self.timeline],
            'pickup_list': [product.id for product in self.pickup_list],
            'max_volume': round(self.max_volume, 4),
            'offload': {pid: {str(k): v for k, v in units.items()} for pid, units in self.offload.items()},
        }


def _next_delivery(plan, start_index):
    """First delivery index >= start_index that holds any box, or None."""
    for index in DELIVERY_INDEXES:
        if index >= start_index and any(line.quantities.get(index, 0) > 0 for line in plan.lines):
            return index
    return None


def _offload_delivery(plan, delivery_index, needed, offload, pickup_list):
    """
    Remove boxes from one delivery, heaviest product first, until `needed`
    cubic feet are freed or the delivery is empty. Mutates the working plan.

    Returns:
        Volume removed
    """
    removed = 0.0
    heaviest_first = sorted(plan.lines, key=lambda line: line.product.package_weight_grams, reverse=True)
    for line in heaviest_first:
        while removed < needed and line.quantities.get(delivery_index, 0) > 0:
            line.quantities[delivery_index] -= 1
            removed += line.product.package_volume_cu_ft
            pickup_list.append(line.product)
            units = offload.setdefault(line.product.id, {})
            units[delivery_index] = units.get(delivery_index, 0) + 1
        if removed >= needed:
            break
    return removed


def simulate_freezer(plan, usable_capacity_cu_ft):
    """
    Walk 365 days of freezer use for a delivery plan.

    Volume drains linearly by the plan's total volume / 365 per day. Day 1
    receives the first non-empty delivery; later deliveries arrive once the
    stock falls under 20% of capacity. A delivery that would push the freezer
    past 110% of capacity has its heaviest boxes moved to the pickup list
    until the excess over capacity is freed.

    Args:
        plan: DeliveryPlan to simulate (left untouched)
        usable_capacity_cu_ft: Usable freezer volume in cubic feet

    Returns:
        FreezerSimulation. Its `plan` is the input plan with the offload applied.
    """
    require(plan, 'plan')
    if usable_capacity_cu_ft is None or usable_capacity_cu_ft < 0:
        raise PlanningInputError("usable_capacity_cu_ft must be a non-negative number")
    capacity = float(usable_capacity_cu_ft)

    working = plan.copy()
    daily_drain = plan_volume(working) / DAYS_PER_YEAR
    offload = defaultdict(dict)
    pickup_list = []
    timeline = []
    current = 0.0
    max_volume = 0.0
    pointer = DELIVERY_INDEXES[0]

    for day in range(1, DAYS_PER_YEAR + 1):
        current = max(0.0, current - daily_drain)

        delivery_index = None
        if day == 1 or current < RESTOCK_THRESHOLD * capacity:
            delivery_index = _next_delivery(working, pointer)

        if delivery_index is None:
            timeline.append(TimelinePoint(day=day, volume=current))
            max_volume = max(max_volume, current)
            continue

        incoming = delivery_volume(working, delivery_index)
        if current + incoming > capacity * OVERFLOW_TOLERANCE:
            needed = current + incoming - capacity
            removed = _offload_delivery(working, delivery_index, needed, offload, pickup_list)
            logger.info("Delivery %d overflows freezer by %.2f cu ft, %.2f cu ft moved to pickup",
                        delivery_index, needed, removed)
            incoming -= removed

        current += incoming
        timeline.append(TimelinePoint(day=day, volume=current, is_delivery_day=True,
                                      delivery_index=delivery_index))
        max_volume = max(max_volume, current)
        pointer = delivery_index + 1
        logger.debug("Day %d: delivery %d received, freezer at %.2f cu ft", day, delivery_index, current)

    offload = dict(offload)
    return FreezerSimulation(
        timeline=timeline,
        pickup_list=pickup_list,
        max_volume=max_volume,
        offload=offload,
        plan=apply_offload(plan, offload),
    )
