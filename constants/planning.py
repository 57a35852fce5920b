"""
Planning Constants and Conversion Tables

Contains the fixed factors used by the annual planning engine: portion
weights, calendar lengths, freezer density and frequency bounds.
"""

# Pounds in one kilogram (freezer density is expressed in LB per cubic foot)
LBS_PER_KG = 2.20462

# 1 cubic foot of freezer holds about 25 LB of packaged meat
LBS_PER_CU_FT = 25

# Rule of thumb for the freezer space a household needs, per portion
CU_FT_PER_PORTION = 2.5

# Portion weight of each household member relative to an adult
ADULT_FACTOR = 1.0
TEEN_FACTOR = 0.75
CHILD_FACTOR = 0.5

# Presence factor for members who are not home full time (shared custody)
CUSTODY_PRESENCE = {
    'full': 1.0,
    'biweekly': 0.5,
    'occasional': 0.14,
}

# Calendar
DAYS_PER_YEAR = 365
WEEKS_PER_YEAR = 52
PLAN_LEAD_DAYS = 7

# Deliveries
DELIVERY_INDEXES = (1, 2, 3, 4)
DELIVERY_COUNT = len(DELIVERY_INDEXES)

# Frequencies are edited in quarter meals per week
FREQUENCY_STEP = 0.25
MIN_SCALED_FREQUENCY = 0.25
MAX_SCALED_FREQUENCY = 2.0

# A slot whose annual need is above this fraction of a box still gets one box
MIN_BOX_FRACTION = 0.4

# Freezer simulation
OVERFLOW_TOLERANCE = 1.1      # accept deliveries up to 110% of usable volume
RESTOCK_THRESHOLD = 0.2       # next delivery once stock is under 20% of capacity

# Premium substitution stops after this many single-unit swaps
MAX_SUBSTITUTION_SWAPS = 100

# Slots available per butcher category
MAX_SLOTS_PER_CATEGORY = 10

# Texture that must not be served too often in a short window
GROUND_TEXTURE = 'ground'
GROUND_LOOKBACK_MEALS = 3

# Default household values
DEFAULT_GRAMS_PER_PERSON = 150
DEFAULT_MEALS_PER_WEEK = 5
DEFAULT_PROTEIN_DAYS = (True, True, True, True, True, False, False)
DEFAULT_WEEKLY_BUDGET = 125.0

# Default freezer: a standard fridge freezer and no chest freezer
DEFAULT_FRIDGE_FREEZER_CU_FT = 3.5
DEFAULT_FRIDGE_FREEZER_EFFICIENCY = 0.75
DEFAULT_CHEST_FREEZER_CU_FT = 0.0
DEFAULT_CHEST_FREEZER_EFFICIENCY = 0.90

# Provenance tags for delivery plan lines
SOURCE_OPTIMIZED = 'optimized'
SOURCE_MANUAL = 'manual'
