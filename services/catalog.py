"""
Catalog Service

Classifies imported products into the butcher taxonomy and builds the
read-only Catalog the engine runs on.
"""

from constants import (
    CATEGORY_BEEF, CATEGORY_FISH, CATEGORY_GAME, CATEGORY_PORK, CATEGORY_POULTRY,
    CATEGORY_READY, CATEGORY_SPICE, CONSUMPTION_STAPLE, MAX_LENGTHS, VALID_CATEGORIES,
    VALID_CONSUMPTION_TYPES,
)
from models.planning import Catalog, Product
from utils.errors import PlanningInputError
from utils.logging_utils import get_logger
from utils.sanitizer import sanitize_code, sanitize_product_name

logger = get_logger(__name__)

# Name keywords per category, checked in this order (first hit wins)
CATEGORY_KEYWORDS = [
    (CATEGORY_SPICE, ('épice', 'epice', 'rub', 'sauce', 'assaisonnement', 'marinade', 'sel ', 'poivre')),
    (CATEGORY_READY, ('pâté', 'lasagne', 'pizza', 'tourtière', 'quiche')),
    (CATEGORY_POULTRY, ('aileron', 'pilon', 'haut de cuisse', 'poulet', 'volaille', 'dinde')),
    (CATEGORY_PORK, ('porc', 'pork', 'bacon', 'saucisse', 'jambon', 'cote levée', 'côte levée', 'flanc')),
    (CATEGORY_BEEF, ('boeuf', 'bœuf', 'beef', 'steak', 'bavette', 'ribeye', 't-bone', 'tomahawk',
                     'viande fumée', 'smoked meat', 'burger')),
    (CATEGORY_FISH, ('poisson', 'saumon', 'truite', 'morue', 'crevette', 'homard', 'pétoncle',
                     'fruit de mer', 'tilapia', 'aiglefin')),
    (CATEGORY_GAME, ('bison', 'cerf', 'canard', 'agneau', 'cheval')),
]

# Loose category labels (French catalog exports) -> taxonomy
CATEGORY_ALIASES = [
    ('boeuf', CATEGORY_BEEF),
    ('poulet', CATEGORY_POULTRY),
    ('porc', CATEGORY_PORK),
    ('poisson', CATEGORY_FISH),
    ('mer', CATEGORY_FISH),
    ('gibier', CATEGORY_GAME),
    ('prêt', CATEGORY_READY),
    ('epice', CATEGORY_SPICE),
]


def detect_category(name, current=''):
    """
    Guess a product's category from its name.

    Falls back to normalizing the current category label, and finally returns
    the current label unchanged (or 'Other' when there is none).
    """
    lowered = (name or '').lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category

    current = current or ''
    if current in VALID_CATEGORIES:
        return current
    label = current.lower()
    for alias, category in CATEGORY_ALIASES:
        if alias in label:
            return category
    return current or 'Other'


def clean_product_record(record):
    """
    Normalize one imported product record.

    Records whose category is outside the taxonomy are reclassified from the
    product name. Unknown consumption types become 'staple'.
    """
    if not isinstance(record, dict) or not record.get('id'):
        raise PlanningInputError("Product record needs an id")

    cleaned = dict(record)
    for key in ('price', 'sale_price', 'package_weight_grams'):
        if record.get(key) in (None, ''):
            cleaned[key] = None if key == 'sale_price' else 0.0
            continue
        try:
            cleaned[key] = max(0.0, float(record[key]))
        except (TypeError, ValueError):
            raise PlanningInputError(f"Invalid {key} for product {record['id']}: {record[key]!r}")
    cleaned['id'] = sanitize_code(record['id'], MAX_LENGTHS['sku'])
    cleaned['sku'] = sanitize_code(record.get('sku') or record['id'], MAX_LENGTHS['sku'])
    cleaned['name'] = sanitize_product_name(record.get('name'))
    cleaned['texture'] = sanitize_code(record.get('texture'), MAX_LENGTHS['texture'])

    category = sanitize_code(record.get('category'), MAX_LENGTHS['category'])
    if category not in VALID_CATEGORIES:
        category = detect_category(cleaned['name'], category)
        logger.debug("Product %s classified as %s", cleaned['id'], category)
    cleaned['category'] = category

    if cleaned.get('consumption_type') not in VALID_CONSUMPTION_TYPES:
        cleaned['consumption_type'] = CONSUMPTION_STAPLE
    return cleaned


def build_catalog(records):
    """
    Build a Catalog from plain product records (dicts or Product instances).

    Raises:
        PlanningInputError: If records is None or a record is malformed
    """
    if records is None:
        raise PlanningInputError("catalog records are required")

    products = []
    for record in records:
        if isinstance(record, Product):
            products.append(record)
            continue
        try:
            products.append(Product.from_dict(record))
        except (KeyError, TypeError, ValueError) as e:
            raise PlanningInputError(f"Invalid product record: {e}")
    return Catalog(products)
