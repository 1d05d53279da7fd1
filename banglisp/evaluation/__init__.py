from banglisp.evaluation.evaluator import evaluate
from banglisp.evaluation.apply import apply, apply_values, resolve_function

__all__ = ["evaluate", "apply", "apply_values", "resolve_function"]
