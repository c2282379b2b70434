# src/tiny_predicates/modules/predicates/domain/combinators.py
"""
Combinadores lógicos de predicados.

Arquitectura: Domain Layer
Responsabilidad: Componer predicados existentes (disyunción, conjunción, negación).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, TypeVar

from tiny_predicates.core.predicate import Failure, Predicate, Result, Success

T = TypeVar("T")


def _require_predicates(combinator: str, predicates: tuple) -> None:
    if not predicates:
        raise ValueError(
            f"{combinator}() necesita al menos un predicado contra el cual evaluar el valor"
        )


@dataclass(frozen=True, repr=False)
class _Or(Predicate[T]):
    predicates: Tuple[Predicate[T], ...]

    @property
    def description(self) -> str:
        descriptions = [p.description for p in self.predicates]
        if len(descriptions) == 1:
            return descriptions[0]
        return "either " + " or ".join(descriptions)

    def check(self, value: T) -> Result:
        # Corto circuito: el primer éxito gana
        for predicate in self.predicates:
            if predicate.check(value).is_success:
                return Success(value)
        return Failure(value, self.description)


@dataclass(frozen=True, repr=False)
class _And(Predicate[T]):
    predicates: Tuple[Predicate[T], ...]

    @property
    def description(self) -> str:
        return " and ".join(p.description for p in self.predicates)

    def check(self, value: T) -> Result:
        # Corto circuito: el primer fallo se reporta tal cual
        for predicate in self.predicates:
            result = predicate.check(value)
            if not result.is_success:
                return result
        return Success(value)


@dataclass(frozen=True, repr=False)
class _Not(Predicate[T]):
    predicate: Predicate[T]

    @property
    def description(self) -> str:
        return f"not {self.predicate.description}"

    def check(self, value: T) -> Result:
        if self.predicate.check(value).is_success:
            return Failure(value, self.description)
        return Success(value)


def or_(*predicates: Predicate[T]) -> Predicate[T]:
    """
    Disyunción lógica: el valor pasa si cumple AL MENOS uno de los predicados.

    Los predicados se evalúan en orden y la evaluación se detiene
    en el primer éxito.

    Raises:
        ValueError: Si no se pasa ningún predicado.
    """
    _require_predicates("or_", predicates)
    return _Or(tuple(predicates))


def and_(*predicates: Predicate[T]) -> Predicate[T]:
    """
    Conjunción lógica: el valor pasa si cumple TODOS los predicados.

    El fallo reportado es el del primer predicado que no se cumple.

    Raises:
        ValueError: Si no se pasa ningún predicado.
    """
    _require_predicates("and_", predicates)
    return _And(tuple(predicates))


def not_(predicate: Predicate[T]) -> Predicate[T]:
    """Negación lógica de un predicado."""
    return _Not(predicate)
