"""
Planning Errors

Exceptions raised by the planning engine for caller mistakes. Sparse or
empty household data is never an error; it produces zero-valued results.
"""

from constants import DELIVERY_INDEXES


class PlanningInputError(ValueError):
    """Raised when an engine call receives an invalid argument (missing catalog, bad delivery index...)."""
    pass


def require(value, name):
    """Reject a missing required argument at the public boundary."""
    if value is None:
        raise PlanningInputError(f"{name} is required")
    return value


def validate_delivery_index(delivery_index):
    """Check that a delivery index is one of 1..4 and return it as int."""
    try:
        index = int(delivery_index)
    except (TypeError, ValueError):
        raise PlanningInputError(f"Invalid delivery index: {delivery_index!r}")
    if index not in DELIVERY_INDEXES:
        raise PlanningInputError(f"Delivery index must be one of {DELIVERY_INDEXES}, got {index}")
    return index
