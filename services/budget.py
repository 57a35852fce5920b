"""
Budget Service

Fits a household's slot frequencies to a weekly budget, and swaps premium
boxes for cheaper staples when a built plan still runs over budget.
"""

import math

from constants import (
    BUDGET_FILLERS, FREQUENCY_STEP, MAX_SCALED_FREQUENCY, MAX_SUBSTITUTION_SWAPS,
    MIN_SCALED_FREQUENCY, SOURCE_OPTIMIZED, WEEKS_PER_YEAR,
)
from models.planning import CartLine, empty_quantities
from utils.errors import require
from utils.logging_utils import get_logger
from .cart import plan_total
from .demand import calculate_demand, non_negative

logger = get_logger(__name__)


def round_to_step(value, step=FREQUENCY_STEP):
    """Round half-up to the nearest step (0.25 meals/week by default)."""
    return math.floor(value / step + 0.5) * step


def scale_frequencies(frequencies, current_annual_cost, target_weekly_budget):
    """
    Rescale every positive frequency by one ratio toward the target budget.

    Each scaled value is rounded to the nearest quarter and clamped to
    [0.25, 2.0], so an active slot never drops to zero and no slot dominates.

    Args:
        frequencies: Mapping of slot key -> weekly frequency
        current_annual_cost: Annual cost of the current frequencies
        target_weekly_budget: Budget per week to aim for

    Returns:
        New mapping; a copy of the input when the current cost is 0.
    """
    scaled = dict(frequencies)
    if current_annual_cost <= 0:
        return scaled

    ratio = (non_negative(target_weekly_budget) * WEEKS_PER_YEAR) / current_annual_cost
    for key, frequency in frequencies.items():
        frequency = non_negative(frequency)
        if frequency <= 0:
            continue
        new_frequency = round_to_step(frequency * ratio)
        scaled[key] = min(MAX_SCALED_FREQUENCY, max(MIN_SCALED_FREQUENCY, new_frequency))
    logger.debug("Scaled %d frequencies by ratio %.3f", len(scaled), ratio)
    return scaled


def auto_scale_to_budget(profile, catalog, target_weekly_budget, teen_factor=None, child_factor=None):
    """
    Rescale the profile's active frequencies so annual cost approaches budget x 52.

    Returns:
        Updated slot frequency mapping. The profile itself is not modified.
    """
    require(profile, 'profile')
    demand = calculate_demand(profile, catalog, teen_factor, child_factor)
    if demand.total_cost <= 0:
        logger.debug("Nothing to scale: current annual cost is 0")
        return dict(profile.slot_frequencies)

    scaled = scale_frequencies(profile.slot_frequencies, demand.total_cost, target_weekly_budget)
    logger.info("Auto-scaled frequencies from %.2f$/week toward %.2f$/week",
                demand.total_cost / WEEKS_PER_YEAR, non_negative(target_weekly_budget))
    return scaled


def find_budget_filler(catalog):
    """Cheapest-per-kg available filler product (ground beef, poultry pieces or whole birds)."""
    candidates = [
        p for p in catalog
        if p.is_available and p.package_weight_grams > 0 and any(
            p.category == category and p.texture in textures
            for category, textures in BUDGET_FILLERS
        )
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda p: p.price / p.package_weight_grams)


def substitute_premium_items(plan, catalog, target_weekly_budget):
    """
    Swap premium boxes for a cheap filler until the plan fits the annual budget.

    One unit of the most expensive premium line is removed from its first
    non-empty delivery and one unit of the filler is added to that same
    delivery, up to MAX_SUBSTITUTION_SWAPS times.

    Returns:
        (new_plan, annual_cost) - the input plan is left untouched.
    """
    require(plan, 'plan')
    require(catalog, 'catalog')

    working = plan.copy()
    cost = plan_total(working)
    annual_budget = non_negative(target_weekly_budget) * WEEKS_PER_YEAR
    if cost <= annual_budget:
        return working, cost

    logger.info("Plan over budget (%.0f$ > %.0f$), substituting premium items", cost, annual_budget)
    filler = find_budget_filler(catalog)
    if filler is None:
        logger.warning("No budget filler in catalog, plan left over budget")
        return working, cost

    swaps = 0
    while cost > annual_budget and swaps < MAX_SUBSTITUTION_SWAPS:
        by_price = sorted(working.lines, key=lambda line: line.product.price, reverse=True)
        expensive = next((line for line in by_price
                          if line.product.is_premium and line.product.id != filler.id
                          and line.total_quantity > 0), None)
        if expensive is None:
            break

        delivery = next(index for index, qty in sorted(expensive.quantities.items()) if qty > 0)
        expensive.quantities[delivery] -= 1
        cost -= expensive.product.effective_price

        filler_line = working.get_line(filler.id)
        if filler_line is None:
            filler_line = CartLine(product=filler, quantities=empty_quantities(), source=SOURCE_OPTIMIZED)
            working.lines.append(filler_line)
        filler_line.quantities[delivery] = filler_line.quantities.get(delivery, 0) + 1
        cost += filler.effective_price

        if expensive.total_quantity == 0:
            working.lines.remove(expensive)
        swaps += 1

    logger.info("Budget substitution: %d swaps, annual cost %.2f$", swaps, cost)
    return working, cost
