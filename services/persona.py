"""
Persona Service

Bulk-initializes a household's preference slots from a named persona
template, and loads the family-composition presets.
"""

from constants import (
    CONSUMPTION_PROFILES, CONSUMPTION_STAPLE, MAX_SLOTS_PER_CATEGORY, PERSONA_TEMPLATES,
    SLOT_CATEGORIES,
)
from models.planning import SlotKey
from utils.errors import PlanningInputError, require
from utils.logging_utils import get_logger
from .budget import auto_scale_to_budget
from .demand import non_negative

logger = get_logger(__name__)


def has_existing_customizations(profile):
    """
    True when applying a persona would overwrite user choices.

    That is the case as soon as one slot has a positive frequency and one
    product selection is present.
    """
    require(profile, 'profile')
    has_frequency = any(non_negative(f) > 0 for f in profile.slot_frequencies.values())
    has_selection = any(bool(v) for v in profile.slot_selections.values())
    return has_frequency and has_selection


def candidates_for(category, catalog, prefer_staples=False):
    """Available products that may fill a slot category, in catalog order."""
    _, categories = SLOT_CATEGORIES[category]
    candidates = [p for p in catalog.in_categories(categories) if p.is_available]
    if prefer_staples:
        # sorted() is stable, so catalog order is kept within each group
        candidates = sorted(candidates, key=lambda p: p.consumption_type != CONSUMPTION_STAPLE)
    return candidates


def match_rule(rule, candidates, used_ids):
    """
    Pick the product for one persona rule.

    Keywords are tried in order against product names (case-insensitive);
    the first unused candidate containing the keyword wins. Without any match
    the first unused candidate is taken.
    """
    unused = [p for p in candidates if p.id not in used_ids]
    for keyword in rule.get('keywords', []):
        keyword = keyword.lower()
        for product in unused:
            if keyword in product.name.lower():
                return product
    return unused[0] if unused else None


def apply_persona(persona_id, catalog, profile, prefer_staples=False, teen_factor=None, child_factor=None):
    """
    Overwrite the profile's slots with a persona template.

    Destructive: callers should check has_existing_customizations() first.
    Every frequency is reset to 0, slots are refilled category by category,
    and the result is auto-scaled to the persona's weekly budget.

    Args:
        persona_id: Key in PERSONA_TEMPLATES
        catalog: Catalog to pick products from
        profile: Current HouseholdProfile (left untouched)
        prefer_staples: Try staple products before quick and roast ones

    Returns:
        Updated HouseholdProfile
    """
    require(catalog, 'catalog')
    require(profile, 'profile')
    template = PERSONA_TEMPLATES.get(persona_id)
    if template is None:
        raise PlanningInputError(f"Unknown persona: {persona_id}")

    updated = profile.copy(
        slot_frequencies={key: 0.0 for key in profile.slot_frequencies},
        slot_selections=dict(profile.slot_selections),
    )
    used_ids = set()

    for category in SLOT_CATEGORIES:
        rules = template['rules'].get(category, [])
        candidates = candidates_for(category, catalog, prefer_staples)
        slot_index = 1

        for rule in rules:
            if slot_index > MAX_SLOTS_PER_CATEGORY:
                break
            product = match_rule(rule, candidates, used_ids)
            if product is None:
                continue
            slot = SlotKey.for_slot(category, slot_index)
            updated.slot_selections[slot.slot_name] = product.id
            updated.slot_frequencies[slot.encode()] = float(rule['weekly_frequency'])
            used_ids.add(product.id)
            slot_index += 1

        for index in range(slot_index, MAX_SLOTS_PER_CATEGORY + 1):
            updated.slot_frequencies[SlotKey.for_slot(category, index).encode()] = 0.0

    updated.weekly_budget = template['weekly_budget']
    updated.selected_persona_id = persona_id
    updated.slot_frequencies = auto_scale_to_budget(
        updated, catalog, template['weekly_budget'], teen_factor, child_factor)

    logger.info("Persona '%s' applied: %d products assigned", persona_id, len(used_ids))
    return updated


def apply_consumption_profile(profile_id, profile):
    """Load a family-composition preset (members and grams per person)."""
    require(profile, 'profile')
    preset = CONSUMPTION_PROFILES.get(profile_id)
    if preset is None:
        raise PlanningInputError(f"Unknown consumption profile: {profile_id}")

    logger.info("Consumption profile '%s' loaded", profile_id)
    return profile.copy(
        adults=preset['adults'],
        teens=preset['teens'],
        children=preset['children'],
        grams_per_person=preset['grams_per_person'],
    )
