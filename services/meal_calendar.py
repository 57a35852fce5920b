"""
Meal Calendar Service

Assigns purchased stock to the days of the planning year.

The daily pick is driven by a seeded pseudo-random ordering of each
delivery's stock, so the same cart, household and start date always give
the same calendar.
"""

import math
from datetime import datetime, timedelta, timezone

from constants import (
    CATEGORY_APPETIZER, CONSUMPTION_QUICK, CONSUMPTION_ROAST, CONSUMPTION_STAPLE, CUSTODY_PRESENCE,
    DAYS_PER_YEAR, DELIVERY_INDEXES, GROUND_LOOKBACK_MEALS, GROUND_TEXTURE, PLAN_LEAD_DAYS,
)
from models.planning import CalendarDay, clone_calendar
from utils.errors import PlanningInputError, require
from utils.logging_utils import get_logger
from .demand import non_negative

logger = get_logger(__name__)

BUCKETS = (CONSUMPTION_STAPLE, CONSUMPTION_QUICK, CONSUMPTION_ROAST)

# Preferred bucket per weekday (Monday=0)
PREFERRED_BUCKET = {
    0: CONSUMPTION_STAPLE,
    1: CONSUMPTION_STAPLE,
    2: CONSUMPTION_STAPLE,
    3: CONSUMPTION_STAPLE,
    4: CONSUMPTION_QUICK,
    5: CONSUMPTION_QUICK,
    6: CONSUMPTION_ROAST,
}

# Buckets tried when the preferred one is empty
FALLBACK_BUCKETS = (CONSUMPTION_QUICK, CONSUMPTION_STAPLE)


def next_plan_start(today=None):
    """First Monday at least a week after today, computed on the UTC calendar."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    start = today + timedelta(days=PLAN_LEAD_DAYS)
    while start.weekday() != 0:
        start += timedelta(days=1)
    return start


def pseudo_random(seed):
    """Deterministic hash of an integer seed to [0, 1)."""
    x = math.sin(seed) * 10000
    return x - math.floor(x)


def _char_sum(text):
    return sum(ord(char) for char in text)


def _epoch_millis(day):
    return int(datetime(day.year, day.month, day.day, tzinfo=timezone.utc).timestamp() * 1000)


def average_consumption_grams(profile):
    """Grams of protein eaten at one household meal, with custody presence applied."""
    teen_presence = CUSTODY_PRESENCE.get(profile.teens_frequency, 1.0)
    child_presence = CUSTODY_PRESENCE.get(profile.children_frequency, 1.0)
    portions = (non_negative(profile.adults)
                + non_negative(profile.teens) * teen_presence
                + non_negative(profile.children) * 0.5 * child_presence)
    return portions * non_negative(profile.grams_per_person)


def _is_meal_stock(product):
    return not (product.is_breakfast or product.is_appetizer or product.category == CATEGORY_APPETIZER)


def build_stock(plan, avg_consumption, start_date):
    """
    Split the plan into meal units per delivery and bucket.

    Each line contributes floor(box weight x quantity / meal size) meals to
    its consumption-type bucket; untagged products count as staples. Every
    bucket is then put in a seeded order.

    Returns:
        {delivery_index: {bucket: [Product, ...]}} for deliveries that hold meals
    """
    stock = {}
    for line in plan.lines:
        product = line.product
        if not _is_meal_stock(product):
            continue
        bucket = product.consumption_type if product.consumption_type in BUCKETS else CONSUMPTION_STAPLE
        for index in DELIVERY_INDEXES:
            qty = line.quantities.get(index, 0)
            if qty <= 0:
                continue
            meals = math.floor(non_negative(product.package_weight_grams) * qty / avg_consumption)
            if meals <= 0:
                continue
            buckets = stock.setdefault(index, {name: [] for name in BUCKETS})
            buckets[bucket].extend([product] * meals)

    start_ms = _epoch_millis(start_date)
    for index, buckets in stock.items():
        seed = start_ms + index
        for name in BUCKETS:
            buckets[name].sort(key=lambda p: pseudo_random(_char_sum(p.id) + seed))
    return stock


def _pick_meal(stock, weekday, history):
    """Take one meal from the active stock, or None when nothing fits."""
    preferred = PREFERRED_BUCKET[weekday]
    if stock[preferred]:
        order = (preferred,)
    else:
        order = tuple(name for name in FALLBACK_BUCKETS if stock[name])

    for name in order:
        bucket = stock[name]
        last_category = history[-1].category if history else ''
        last_texture = history[-1].texture if history else ''
        candidates = [p for p in bucket if p.category != last_category and p.texture != last_texture]

        if len(history) >= GROUND_LOOKBACK_MEALS:
            recent = history[-GROUND_LOOKBACK_MEALS:]
            if any(meal.texture == GROUND_TEXTURE for meal in recent):
                candidates = [p for p in candidates if p.texture != GROUND_TEXTURE]

        if not candidates:
            candidates = bucket
        meal = candidates[0]
        bucket.remove(meal)
        return meal
    return None


def _consume_unit(stock, product):
    """Drop one unit of a pinned product from the active stock, if any is left."""
    for name in BUCKETS:
        for unit in stock[name]:
            if unit.id == product.id:
                stock[name].remove(unit)
                return


def _empty_stock():
    return {name: [] for name in BUCKETS}


def generate_calendar(plan, profile, start_date, previous=None):
    """
    Build the 365-day meal calendar for a delivery plan.

    Args:
        plan: DeliveryPlan holding the purchased boxes
        profile: HouseholdProfile (protein-day mask, weekly meal cap, members)
        start_date: First day of the plan (see next_plan_start)
        previous: Optional earlier calendar; its locked days are kept as-is

    Returns:
        List of 365 CalendarDay. An empty plan gives only free days.
    """
    require(plan, 'plan')
    require(profile, 'profile')
    require(start_date, 'start_date')
    if not isinstance(profile.protein_days, (list, tuple)) or len(profile.protein_days) != 7:
        raise PlanningInputError("protein_days must hold 7 flags, Monday to Sunday")

    pinned = {day.date: day for day in (previous or []) if day.locked}
    meals_per_week = max(0, int(non_negative(profile.meals_per_week)))
    avg_consumption = average_consumption_grams(profile)

    stock_by_delivery = {}
    if avg_consumption > 0 and meals_per_week > 0:
        stock_by_delivery = build_stock(plan, avg_consumption, start_date)
    pending = sorted(stock_by_delivery)

    current = _empty_stock()
    history = []
    meals_this_week = 0
    calendar = []

    for offset in range(DAYS_PER_YEAR):
        day = CalendarDay(date=start_date + timedelta(days=offset))
        weekday = day.date.weekday()
        if weekday == 0:
            meals_this_week = 0

        # restock: the first day receives delivery 1, later days the next non-empty delivery
        if not any(current.values()) and pending:
            index = pending.pop(0)
            current = {name: list(units) for name, units in stock_by_delivery[index].items()}
            day.is_delivery_day = True
            day.delivery_index = index

        locked = pinned.get(day.date)
        if locked is not None:
            day.meal = locked.meal
            day.is_free_day = locked.is_free_day or locked.meal is None
            day.locked = True
            if day.meal is not None:
                _consume_unit(current, day.meal)
                history.append(day.meal)
                meals_this_week += 1
            calendar.append(day)
            continue

        should_eat = bool(profile.protein_days[weekday]) and meals_this_week < meals_per_week
        meal = _pick_meal(current, weekday, history) if should_eat else None
        if meal is not None:
            day.meal = meal
            history.append(meal)
            meals_this_week += 1
        else:
            day.is_free_day = True
        calendar.append(day)

    logger.info("Calendar generated from %s: %d meals, %d deliveries, %d locked days kept",
                start_date.isoformat(), len(history),
                sum(1 for d in calendar if d.is_delivery_day), sum(1 for d in calendar if d.locked))
    return calendar


def swap_calendar_days(calendar, index_a, index_b):
    """
    Exchange the meal/free state of two days and pin both.

    Returns:
        New list of CalendarDay; the calendar passed in is unchanged.
    """
    require(calendar, 'calendar')
    for index in (index_a, index_b):
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(calendar):
            raise PlanningInputError(f"Calendar day index out of range: {index!r}")

    swapped = clone_calendar(calendar)
    day_a, day_b = swapped[index_a], swapped[index_b]
    day_a.meal, day_b.meal = day_b.meal, day_a.meal
    day_a.is_free_day, day_b.is_free_day = day_b.is_free_day, day_a.is_free_day
    day_a.locked = True
    day_b.locked = True
    return swapped
