"""
Services Package

Planning engine modules: demand, personas, budget fitting, purchase plans,
freezer simulation and the meal calendar.
"""

from .demand import (
    calculate_demand,
    portions_per_meal,
    coverage_ratio,
)

from .cart import (
    add_to_plan,
    update_quantity,
    remove_from_plan,
    plan_total,
    delivery_totals,
    deliveries_below_minimum,
    apply_offload,
)

from .budget import (
    auto_scale_to_budget,
    scale_frequencies,
    substitute_premium_items,
)

from .persona import (
    has_existing_customizations,
    apply_persona,
    apply_consumption_profile,
)

from .purchase_plan import (
    build_purchase_plan,
    box_count_for,
    split_across_deliveries,
)

from .freezer import (
    simulate_freezer,
    plan_volume,
    required_space_for_family,
)

from .meal_calendar import (
    next_plan_start,
    generate_calendar,
    swap_calendar_days,
)

from .catalog import (
    detect_category,
    clean_product_record,
    build_catalog,
)

__all__ = [
    # Demand
    'calculate_demand',
    'portions_per_meal',
    'coverage_ratio',
    # Cart
    'add_to_plan',
    'update_quantity',
    'remove_from_plan',
    'plan_total',
    'delivery_totals',
    'deliveries_below_minimum',
    'apply_offload',
    # Budget
    'auto_scale_to_budget',
    'scale_frequencies',
    'substitute_premium_items',
    # Persona
    'has_existing_customizations',
    'apply_persona',
    'apply_consumption_profile',
    # Purchase plan
    'build_purchase_plan',
    'box_count_for',
    'split_across_deliveries',
    # Freezer
    'simulate_freezer',
    'plan_volume',
    'required_space_for_family',
    # Calendar
    'next_plan_start',
    'generate_calendar',
    'swap_calendar_days',
    # Catalog
    'detect_category',
    'clean_product_record',
    'build_catalog',
]
