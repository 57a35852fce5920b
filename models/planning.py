"""
Planning Domain Types

Plain in-memory records the planning engine computes over. They carry no
database state; the SQLAlchemy models convert to and from them, and every
record that crosses the persistence boundary has a flat to_dict/from_dict
pair.
"""

import copy
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Dict, List, Optional

from constants import (
    CONSUMPTION_STAPLE, DEFAULT_CHEST_FREEZER_CU_FT, DEFAULT_CHEST_FREEZER_EFFICIENCY,
    DEFAULT_FRIDGE_FREEZER_CU_FT, DEFAULT_FRIDGE_FREEZER_EFFICIENCY, DEFAULT_GRAMS_PER_PERSON,
    DEFAULT_MEALS_PER_WEEK, DEFAULT_PROTEIN_DAYS, DEFAULT_WEEKLY_BUDGET, DELIVERY_INDEXES,
    LBS_PER_CU_FT, LBS_PER_KG, SLOT_CATEGORIES, SLOT_KEY_PREFIX, SLOT_KEY_SEPARATOR,
    SOURCE_OPTIMIZED,
)
from utils.errors import PlanningInputError


@dataclass(frozen=True)
class Product:
    """Catalog entry. Read-only reference data for the engine."""
    id: str
    sku: str
    name: str
    price: float
    category: str
    consumption_type: str = CONSUMPTION_STAPLE
    texture: str = ''
    package_weight_grams: float = 0.0
    sale_price: Optional[float] = None
    is_available: bool = True
    is_premium: bool = False
    is_appetizer: bool = False
    is_breakfast: bool = False

    @property
    def effective_price(self):
        """Sale price when one is set, otherwise the regular price."""
        return self.sale_price if self.sale_price else self.price

    @property
    def package_weight_kg(self):
        return max(0.0, self.package_weight_grams or 0.0) / 1000

    @property
    def price_per_kg(self):
        if self.package_weight_kg <= 0:
            return 0.0
        return self.effective_price / self.package_weight_kg

    @property
    def package_volume_cu_ft(self):
        """Freezer volume taken by one box."""
        return self.package_weight_kg * LBS_PER_KG / LBS_PER_CU_FT

    def to_dict(self):
        return {
            'id': self.id,
            'sku': self.sku,
            'name': self.name,
            'price': self.price,
            'sale_price': self.sale_price,
            'category': self.category,
            'consumption_type': self.consumption_type,
            'texture': self.texture,
            'package_weight_grams': self.package_weight_grams,
            'is_available': self.is_available,
            'is_premium': self.is_premium,
            'is_appetizer': self.is_appetizer,
            'is_breakfast': self.is_breakfast,
        }

    @classmethod
    def from_dict(cls, record):
        return cls(
            id=str(record['id']),
            sku=str(record.get('sku') or record['id']),
            name=record.get('name', ''),
            price=float(record.get('price') or 0.0),
            sale_price=float(record['sale_price']) if record.get('sale_price') else None,
            category=record.get('category', ''),
            consumption_type=record.get('consumption_type') or CONSUMPTION_STAPLE,
            texture=record.get('texture') or '',
            package_weight_grams=float(record.get('package_weight_grams') or 0.0),
            is_available=bool(record.get('is_available', True)),
            is_premium=bool(record.get('is_premium', False)),
            is_appetizer=bool(record.get('is_appetizer', False)),
            is_breakfast=bool(record.get('is_breakfast', False)),
        )


class Catalog:
    """Read-only product lookup that keeps catalog iteration order."""

    def __init__(self, products):
        self._products = list(products)
        self._by_id = {p.id: p for p in self._products}

    def get(self, product_id):
        if not product_id:
            return None
        return self._by_id.get(product_id)

    def in_categories(self, categories):
        return [p for p in self._products if p.category in categories]

    def __iter__(self):
        return iter(self._products)

    def __len__(self):
        return len(self._products)


@dataclass(frozen=True)
class SlotKey:
    """
    A preference slot such as "beef option #3".

    The persisted form is the string "Custom|boeuf_slot_3"; the category is
    recovered from the slot name prefix.
    """
    category: str
    slot_name: str

    def encode(self):
        return f"{SLOT_KEY_PREFIX}{SLOT_KEY_SEPARATOR}{self.slot_name}"

    @classmethod
    def for_slot(cls, category, index):
        prefix, _ = SLOT_CATEGORIES[category]
        return cls(category=category, slot_name=f"{prefix}_{index}")

    @classmethod
    def decode(cls, key):
        """Parse "Custom|<slotName>"; returns None for keys that are not custom slots."""
        if not key or SLOT_KEY_SEPARATOR not in key:
            return None
        kind, slot_name = key.split(SLOT_KEY_SEPARATOR, 1)
        if kind != SLOT_KEY_PREFIX or not slot_name:
            return None
        for category, (prefix, _) in SLOT_CATEGORIES.items():
            if slot_name.startswith(prefix + '_'):
                return cls(category=category, slot_name=slot_name)
        return cls(category='', slot_name=slot_name)


@dataclass
class HouseholdProfile:
    """Family composition and weekly habits. Read-only to the engine; operations return copies."""
    adults: float = 2
    teens: float = 0
    children: float = 0
    grams_per_person: float = DEFAULT_GRAMS_PER_PERSON
    restaurant_frequency: float = 0
    meals_per_week: int = DEFAULT_MEALS_PER_WEEK
    protein_days: tuple = DEFAULT_PROTEIN_DAYS
    teens_frequency: str = 'full'
    children_frequency: str = 'full'
    # "Custom|boeuf_slot_1" -> meals per week
    slot_frequencies: Dict[str, float] = field(default_factory=dict)
    # "boeuf_slot_1" -> product id
    slot_selections: Dict[str, str] = field(default_factory=dict)
    selected_persona_id: Optional[str] = None
    weekly_budget: float = DEFAULT_WEEKLY_BUDGET

    def copy(self, **changes):
        clone = replace(self, **changes)
        if 'slot_frequencies' not in changes:
            clone.slot_frequencies = dict(self.slot_frequencies)
        if 'slot_selections' not in changes:
            clone.slot_selections = dict(self.slot_selections)
        return clone

    def selection_for(self, slot):
        return self.slot_selections.get(slot.slot_name) or None

    def to_dict(self):
        return {
            'adults': self.adults,
            'teens': self.teens,
            'children': self.children,
            'grams_per_person': self.grams_per_person,
            'restaurant_frequency': self.restaurant_frequency,
            'meals_per_week': self.meals_per_week,
            'protein_days': [bool(d) for d in self.protein_days],
            'teens_frequency': self.teens_frequency,
            'children_frequency': self.children_frequency,
            'slot_frequencies': dict(self.slot_frequencies),
            'slot_selections': dict(self.slot_selections),
            'selected_persona_id': self.selected_persona_id,
            'weekly_budget': self.weekly_budget,
        }

    @classmethod
    def from_dict(cls, record):
        record = record or {}
        defaults = cls()
        protein_days = record.get('protein_days')
        if not isinstance(protein_days, (list, tuple)) or len(protein_days) != 7:
            protein_days = defaults.protein_days
        return cls(
            adults=record.get('adults', defaults.adults),
            teens=record.get('teens', defaults.teens),
            children=record.get('children', defaults.children),
            grams_per_person=record.get('grams_per_person', defaults.grams_per_person),
            restaurant_frequency=record.get('restaurant_frequency', defaults.restaurant_frequency),
            meals_per_week=record.get('meals_per_week', defaults.meals_per_week),
            protein_days=tuple(bool(d) for d in protein_days),
            teens_frequency=record.get('teens_frequency', defaults.teens_frequency),
            children_frequency=record.get('children_frequency', defaults.children_frequency),
            slot_frequencies={k: float(v) for k, v in (record.get('slot_frequencies') or {}).items()},
            slot_selections={k: v for k, v in (record.get('slot_selections') or {}).items() if v},
            selected_persona_id=record.get('selected_persona_id'),
            weekly_budget=record.get('weekly_budget', defaults.weekly_budget),
        )


@dataclass
class FreezerCapacity:
    """Fridge-freezer and chest-freezer volumes (cubic feet) with their usable fractions."""
    fridge_capacity: float = DEFAULT_FRIDGE_FREEZER_CU_FT
    fridge_efficiency: float = DEFAULT_FRIDGE_FREEZER_EFFICIENCY
    chest_capacity: float = DEFAULT_CHEST_FREEZER_CU_FT
    chest_efficiency: float = DEFAULT_CHEST_FREEZER_EFFICIENCY

    def __post_init__(self):
        for name in ('fridge_capacity', 'fridge_efficiency', 'chest_capacity', 'chest_efficiency'):
            if getattr(self, name) < 0:
                raise PlanningInputError(f"{name} cannot be negative")

    @property
    def usable_volume(self):
        fridge = self.fridge_capacity * self.fridge_efficiency
        chest = self.chest_capacity * self.chest_efficiency
        return fridge + chest

    def to_dict(self):
        return {
            'fridge_capacity': self.fridge_capacity,
            'fridge_efficiency': self.fridge_efficiency,
            'chest_capacity': self.chest_capacity,
            'chest_efficiency': self.chest_efficiency,
        }

    @classmethod
    def from_dict(cls, record):
        record = record or {}
        defaults = cls()
        return cls(**{key: float(record.get(key, value)) for key, value in defaults.to_dict().items()})


def empty_quantities():
    return {index: 0 for index in DELIVERY_INDEXES}


@dataclass
class CartLine:
    """One product in the delivery plan with its box count per delivery."""
    product: Product
    quantities: Dict[int, int] = field(default_factory=empty_quantities)
    source: str = SOURCE_OPTIMIZED

    @property
    def total_quantity(self):
        return sum(self.quantities.get(index, 0) for index in DELIVERY_INDEXES)

    @property
    def total_cost(self):
        return self.total_quantity * self.product.effective_price

    @property
    def total_volume_cu_ft(self):
        return self.total_quantity * self.product.package_volume_cu_ft

    def to_dict(self):
        return {
            'product_id': self.product.id,
            'quantities': {str(index): self.quantities.get(index, 0) for index in DELIVERY_INDEXES},
            'source': self.source,
        }


@dataclass
class DeliveryPlan:
    """
    The cart: products with quantities for deliveries 1..4.

    Engine operations never mutate a plan they receive; they return a copy.
    """
    lines: List[CartLine] = field(default_factory=list)

    def copy(self):
        return DeliveryPlan(lines=[
            CartLine(product=line.product, quantities=dict(line.quantities), source=line.source)
            for line in self.lines
        ])

    def get_line(self, product_id):
        for line in self.lines:
            if line.product.id == product_id:
                return line
        return None

    def is_empty(self):
        return not any(line.total_quantity for line in self.lines)

    @property
    def total_quantity(self):
        return sum(line.total_quantity for line in self.lines)

    def to_records(self):
        return [line.to_dict() for line in self.lines]

    @classmethod
    def from_records(cls, records, catalog):
        """Rebuild a plan from persisted records; lines whose product left the catalog are dropped."""
        lines = []
        for record in records or []:
            product = catalog.get(record.get('product_id'))
            if product is None:
                continue
            raw = record.get('quantities') or {}
            quantities = {index: max(0, int(raw.get(str(index), raw.get(index, 0)) or 0))
                          for index in DELIVERY_INDEXES}
            if sum(quantities.values()) == 0:
                continue
            lines.append(CartLine(product=product, quantities=quantities,
                                  source=record.get('source') or SOURCE_OPTIMIZED))
        return cls(lines=lines)


@dataclass
class CalendarDay:
    """One planned day of the meal calendar."""
    date: date
    meal: Optional[Product] = None
    is_delivery_day: bool = False
    delivery_index: Optional[int] = None
    is_free_day: bool = False
    locked: bool = False

    def to_dict(self):
        return {
            'date': self.date.isoformat(),
            'product_id': self.meal.id if self.meal else None,
            'is_delivery_day': self.is_delivery_day,
            'delivery_index': self.delivery_index,
            'is_free_day': self.is_free_day,
            'locked': self.locked,
        }

    @classmethod
    def from_dict(cls, record, catalog):
        return cls(
            date=date.fromisoformat(record['date']),
            meal=catalog.get(record.get('product_id')),
            is_delivery_day=bool(record.get('is_delivery_day')),
            delivery_index=record.get('delivery_index'),
            is_free_day=bool(record.get('is_free_day')),
            locked=bool(record.get('locked')),
        )


@dataclass(frozen=True)
class TimelinePoint:
    """Freezer volume at the end of one simulated day."""
    day: int
    volume: float
    is_delivery_day: bool = False
    delivery_index: Optional[int] = None

    def to_dict(self):
        return {
            'day': self.day,
            'volume': round(self.volume, 4),
            'is_delivery_day': self.is_delivery_day,
            'delivery_index': self.delivery_index,
        }


def clone_calendar(calendar):
    return [copy.copy(day) for day in calendar]
