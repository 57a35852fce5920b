"""
Validation Constants

Contains whitelist values for the product taxonomy, consumption tags and
preference slots, plus field limits for imported catalog records.
"""

# Product categories (fixed taxonomy)
CATEGORY_BEEF = 'Beef'
CATEGORY_POULTRY = 'Poultry'
CATEGORY_PORK = 'Pork'
CATEGORY_FISH = 'Fish/Seafood'
CATEGORY_GAME = 'Game'
CATEGORY_READY = 'Ready-to-eat'
CATEGORY_APPETIZER = 'Appetizer'
CATEGORY_DESSERT = 'Dessert'
CATEGORY_SAUCE = 'Sauce'
CATEGORY_SPICE = 'Spice'

VALID_CATEGORIES = {
    CATEGORY_BEEF, CATEGORY_POULTRY, CATEGORY_PORK, CATEGORY_FISH,
    CATEGORY_GAME, CATEGORY_READY, CATEGORY_APPETIZER, CATEGORY_DESSERT,
    CATEGORY_SAUCE, CATEGORY_SPICE,
}

# Consumption types drive which weekday a product is served on
CONSUMPTION_STAPLE = 'staple'
CONSUMPTION_QUICK = 'quick'
CONSUMPTION_ROAST = 'roast'
VALID_CONSUMPTION_TYPES = {CONSUMPTION_STAPLE, CONSUMPTION_QUICK, CONSUMPTION_ROAST}

# Preference slot key prefix ("Custom|boeuf_slot_1")
SLOT_KEY_PREFIX = 'Custom'
SLOT_KEY_SEPARATOR = '|'

# Butcher categories, in the order personas fill them:
# slot category -> (slot name prefix, catalog categories it draws from)
SLOT_CATEGORIES = {
    'beef': ('boeuf_slot', (CATEGORY_BEEF,)),
    'poultry': ('poulet_slot', (CATEGORY_POULTRY,)),
    'pork': ('porc_slot', (CATEGORY_PORK,)),
    'fish': ('poisson_slot', (CATEGORY_FISH,)),
    'extra': ('extra_slot', (CATEGORY_READY, CATEGORY_GAME)),
}

# Maximum field lengths for imported catalog records
MAX_LENGTHS = {
    'product_name': 200,
    'sku': 50,
    'category': 50,
    'texture': 30,
}
