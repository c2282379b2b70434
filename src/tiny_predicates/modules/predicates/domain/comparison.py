# src/tiny_predicates/modules/predicates/domain/comparison.py
"""
Predicados de comparación.

Arquitectura: Domain Layer
Responsabilidad: Fábricas de predicados sobre valores ordenables (números).

Semántica numérica: la nativa de Python (IEEE-754 para float).
NaN no es menor, mayor ni igual a nada, así que ningún predicado
de este módulo acepta NaN.
"""

from __future__ import annotations

import math
from typing import Any

from tiny_predicates.core.predicate import Predicate
from tiny_predicates.modules.predicates.domain.combinators import and_, or_

# === Guía de Organización ===
# ✅ PUREZA: Solo comparaciones nativas, sin validar tipos.
# ❌ SIN I/O: Nada de logging aquí; eso vive en application/.


def is_equal_to(expected: Any) -> Predicate[Any]:
    """Verifica que el valor sea igual a `expected`."""
    return Predicate.to(f"be equal to {expected}", lambda value: value == expected)


def is_less_than(upper_bound: float) -> Predicate[float]:
    """Verifica que el valor sea estrictamente menor que `upper_bound`."""
    return Predicate.to(f"be less than {upper_bound}", lambda value: value < upper_bound)


def is_greater_than(lower_bound: float) -> Predicate[float]:
    """Verifica que el valor sea estrictamente mayor que `lower_bound`."""
    return Predicate.to(
        f"be greater than {lower_bound}", lambda value: value > lower_bound
    )


def is_less_than_or_equal_to(upper_bound: float) -> Predicate[float]:
    """
    Verifica que el valor sea menor o igual que `upper_bound`.

    Se construye como or_(is_less_than, is_equal_to): si el valor ya es
    menor, la igualdad ni siquiera se evalúa.

    Ejemplo:
        check("InvestmentPeriod", 42, is_less_than_or_equal_to(50))  # -> 42
    """
    return or_(is_less_than(upper_bound), is_equal_to(upper_bound))


def is_greater_than_or_equal_to(lower_bound: float) -> Predicate[float]:
    """Verifica que el valor sea mayor o igual que `lower_bound`."""
    return or_(is_greater_than(lower_bound), is_equal_to(lower_bound))


def is_in_range(lower_bound: float, upper_bound: float) -> Predicate[float]:
    """Verifica que lower_bound <= valor <= upper_bound (ambos inclusive)."""
    return and_(
        is_greater_than_or_equal_to(lower_bound),
        is_less_than_or_equal_to(upper_bound),
    )


def is_integer() -> Predicate[Any]:
    """
    Verifica que el valor sea un entero.

    Acepta int (no bool) y float con parte decimal nula (ej: 5.0).
    """

    def _test(value: Any) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            return True
        return isinstance(value, float) and math.isfinite(value) and value.is_integer()

    return Predicate.to("be an integer", _test)


def is_defined() -> Predicate[Any]:
    """Verifica que el valor no sea None."""
    return Predicate.to("be defined", lambda value: value is not None)
