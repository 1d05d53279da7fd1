"""Registry of special forms for the banglisp evaluator.

Maps names to (handler, arity, variadic). Each handler receives its
arguments unevaluated, after the arity check, and decides itself what to
evaluate and when.
"""

from banglisp.evaluation.special_forms.quote_forms import quote_form, function_form
from banglisp.evaluation.special_forms.if_form import if_form
from banglisp.evaluation.special_forms.set_form import setq_form
from banglisp.evaluation.special_forms.let_forms import let_form, let_star_form
from banglisp.evaluation.special_forms.lambda_form import lambda_form
from banglisp.evaluation.special_forms.define_form import defun_form
from banglisp.evaluation.special_forms.progn_form import progn_form
from banglisp.evaluation.special_forms.logic_forms import not_form, and_form, or_form

SPECIAL_FORMS = {
    "quote": (quote_form, 1, False),
    "function": (function_form, 1, False),
    "if": (if_form, 2, True),
    "setq": (setq_form, 2, False),
    "let": (let_form, 1, True),
    "let*": (let_star_form, 1, True),
    "lambda": (lambda_form, 1, True),
    "defun": (defun_form, 2, True),
    "progn": (progn_form, 0, True),
    "not": (not_form, 1, False),
    "and": (and_form, 0, True),
    "or": (or_form, 0, True),
}


def install_special_forms(ctx) -> None:
    for name, (handler, arity, variadic) in SPECIAL_FORMS.items():
        ctx.install_special_form(name, handler, arity, variadic)
