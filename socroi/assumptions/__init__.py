from .loader import get_default_assumptions, load_assumptions
from .schema import AssumptionsConfig

__all__ = ["AssumptionsConfig", "get_default_assumptions", "load_assumptions"]
