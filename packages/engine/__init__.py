from .scoring import Evaluation, evaluate, evaluate_strict, get_rule, pattern_string
from .letters import aggregate
from .validation import is_letter, validate_guess
from .daily import select_daily_word

__all__ = ["Evaluation", "evaluate", "evaluate_strict", "get_rule", "pattern_string",
           "aggregate", "is_letter", "validate_guess", "select_daily_word"]
