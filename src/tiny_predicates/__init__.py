"""
tiny_predicates: predicados componibles y guard clauses para validar valores.

Uso:
    from tiny_predicates import check, is_less_than_or_equal_to

    check("InvestmentPeriod", 42, is_less_than_or_equal_to(50))
"""

from tiny_predicates.core import Failure, Predicate, Result, Success
from tiny_predicates.modules.predicates import (
    EvaluateValue,
    Evaluation,
    InvalidArgumentError,
    PredicateError,
    and_,
    check,
    is_defined,
    is_equal_to,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_in_range,
    is_integer,
    is_less_than,
    is_less_than_or_equal_to,
    not_,
    or_,
)

__all__ = [
    "Predicate",
    "Result",
    "Success",
    "Failure",
    "check",
    "EvaluateValue",
    "Evaluation",
    "and_",
    "not_",
    "or_",
    "is_defined",
    "is_equal_to",
    "is_greater_than",
    "is_greater_than_or_equal_to",
    "is_in_range",
    "is_integer",
    "is_less_than",
    "is_less_than_or_equal_to",
    "InvalidArgumentError",
    "PredicateError",
]
