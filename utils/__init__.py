# Utility modules for the consumption planner
from .errors import PlanningInputError, require, validate_delivery_index
from .sanitizer import sanitize_product_name, sanitize_code
from .logging_utils import get_logger, setup_logging
