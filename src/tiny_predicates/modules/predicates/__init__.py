# src/tiny_predicates/modules/predicates/__init__.py
"""
Módulo de Predicados.
"""

from __future__ import annotations

# Application
from .application.check import check
from .application.use_cases import EvaluateValue, Evaluation

# Domain
from .domain.combinators import and_, not_, or_
from .domain.comparison import (
    is_defined,
    is_equal_to,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_in_range,
    is_integer,
    is_less_than,
    is_less_than_or_equal_to,
)
from .domain.exceptions import InvalidArgumentError, PredicateError

__all__ = [
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
