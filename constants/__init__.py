"""
Constants Package

Fixed planning factors, taxonomy whitelists, persona templates and the seed
catalog.
"""

from .planning import *  # noqa: F401,F403
from .validation import *  # noqa: F401,F403
from .personas import PERSONA_TEMPLATES, CONSUMPTION_PROFILES, BUDGET_FILLERS
from .catalog import SEED_CATALOG
