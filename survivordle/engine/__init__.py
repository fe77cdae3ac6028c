from .records import Appearance, JURY_TIERS, JURY_TIER_RANK
from .comparators import compare_numeric, compare_text, compare_jury_tier
from .scoring import (
    CLASSIC_ATTRIBUTES,
    FULL_ATTRIBUTES,
    Cell,
    Evaluator,
    EvaluatorConfig,
    Thresholds,
    evaluate,
    feedback_key,
    is_win,
)
from .constraints import filter_candidates
from .validation import normalize, search, validate_guess

__all__ = [
    "Appearance", "JURY_TIERS", "JURY_TIER_RANK",
    "compare_numeric", "compare_text", "compare_jury_tier",
    "CLASSIC_ATTRIBUTES", "FULL_ATTRIBUTES", "Cell", "Evaluator", "EvaluatorConfig", "Thresholds",
    "evaluate", "feedback_key", "is_win",
    "filter_candidates", "normalize", "search", "validate_guess",
]
