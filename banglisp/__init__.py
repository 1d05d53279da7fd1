# Core type aliases for banglisp.
# Every runtime value and every piece of code is a banglisp.types.object.Object;
# these aliases only exist to make signatures in the evaluator readable.
#
# Naming guidance:
# - SExpression: use in reader/special-form code for unevaluated forms.
# - LispValue:  use in evaluator/builtin code for evaluated values.

from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias
LispValue = Any
# Forms and values share one representation
SExpression = LispValue

# Evaluator function type: passed into special forms and the apply engine
EvaluatorFn = Callable[..., LispValue]
