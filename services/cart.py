"""
Delivery Plan Service

Functions for merging, editing and totalling the delivery plan (cart).
Every function returns a new DeliveryPlan; the plan passed in is not modified.
"""

from constants import DELIVERY_INDEXES, SOURCE_MANUAL, SOURCE_OPTIMIZED
from models.planning import CartLine, empty_quantities
from utils.errors import PlanningInputError, require, validate_delivery_index


def _clean_quantities(quantities):
    """Normalize a {delivery: qty} mapping to non-negative ints over 1..4."""
    cleaned = empty_quantities()
    for index, qty in (quantities or {}).items():
        index = validate_delivery_index(index)
        cleaned[index] = max(0, int(qty or 0))
    return cleaned


def _drop_empty_lines(plan):
    plan.lines = [line for line in plan.lines if line.total_quantity > 0]
    return plan


def add_to_plan(plan, product, quantities, source=SOURCE_OPTIMIZED):
    """
    Merge quantities for a product into the plan.

    An existing line has the quantities added per delivery index and keeps its
    provenance tag; otherwise a new line tagged with `source` is appended.
    """
    require(plan, 'plan')
    require(product, 'product')
    added = _clean_quantities(quantities)

    new_plan = plan.copy()
    line = new_plan.get_line(product.id)
    if line is None:
        new_plan.lines.append(CartLine(product=product, quantities=added, source=source))
    else:
        for index in DELIVERY_INDEXES:
            line.quantities[index] = line.quantities.get(index, 0) + added[index]
    return _drop_empty_lines(new_plan)


def update_quantity(plan, product, delivery_index, delta):
    """
    Manual cart edit: change one delivery's quantity by delta.

    Quantities are clamped at 0 and a line whose quantities all reach 0 is
    removed. A touched line is marked as manually pinned.
    """
    require(plan, 'plan')
    require(product, 'product')
    index = validate_delivery_index(delivery_index)
    try:
        delta = int(delta)
    except (TypeError, ValueError):
        raise PlanningInputError(f"Invalid quantity change: {delta!r}")

    new_plan = plan.copy()
    line = new_plan.get_line(product.id)
    if line is None:
        if delta <= 0:
            return new_plan
        line = CartLine(product=product, quantities=empty_quantities(), source=SOURCE_MANUAL)
        new_plan.lines.append(line)

    line.quantities[index] = max(0, line.quantities.get(index, 0) + delta)
    line.source = SOURCE_MANUAL
    return _drop_empty_lines(new_plan)


def remove_from_plan(plan, product_id):
    require(plan, 'plan')
    new_plan = plan.copy()
    new_plan.lines = [line for line in new_plan.lines if line.product.id != product_id]
    return new_plan


def plan_total(plan):
    """Total cost of the plan at effective (sale or regular) prices."""
    return sum(line.total_cost for line in plan.lines)


def delivery_totals(plan):
    """Cost of each delivery index 1..4."""
    totals = {index: 0.0 for index in DELIVERY_INDEXES}
    for line in plan.lines:
        for index in DELIVERY_INDEXES:
            totals[index] += line.quantities.get(index, 0) * line.product.effective_price
    return totals


def deliveries_below_minimum(plan, minimum):
    """Non-empty deliveries whose amount is under the minimum order amount."""
    if not minimum or minimum <= 0:
        return []
    return [index for index, total in delivery_totals(plan).items() if 0 < total < minimum]


def apply_offload(plan, offload):
    """
    Subtract an offload delta from the plan.

    Args:
        plan: DeliveryPlan to start from
        offload: {product_id: {delivery_index: units}} as produced by the
            freezer simulation

    Returns:
        New DeliveryPlan with lines that reach zero removed.
    """
    require(plan, 'plan')
    new_plan = plan.copy()
    for product_id, removed in (offload or {}).items():
        line = new_plan.get_line(product_id)
        if line is None:
            continue
        for index, units in removed.items():
            index = validate_delivery_index(index)
            line.quantities[index] = max(0, line.quantities.get(index, 0) - int(units))
    return _drop_empty_lines(new_plan)
