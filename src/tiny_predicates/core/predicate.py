# src/tiny_predicates/core/predicate.py
"""
Predicate Value Object.

Arquitectura: Modular Monolith
Componente: Value Object (Core)
Responsabilidad: Representar una condición pura e inmutable sobre un valor.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

# === 🧭 Protocolos Arquitectónicos ===
# ✅ CORE: No depende de nada externo.
# 🔒 Inmutabilidad: frozen=True.

T = TypeVar("T")


@dataclass(frozen=True)
class Result:
    """Resultado de evaluar un predicado contra un valor."""

    value: Any

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)


@dataclass(frozen=True)
class Success(Result):
    """El valor cumple el predicado."""


@dataclass(frozen=True)
class Failure(Result):
    """
    El valor NO cumple el predicado.

    `description` completa la frase "<nombre> should ...",
    ej: "be less than 10".
    """

    description: str


class Predicate(ABC, Generic[T]):
    """
    Contrato abstracto de un predicado.

    Invariantes:
    1. Sin efectos secundarios: evaluar dos veces da el mismo resultado.
    2. `description` es una frase verbal ("be equal to 5").
    """

    @property
    @abstractmethod
    def description(self) -> str: ...

    @abstractmethod
    def check(self, value: T) -> Result:
        """Evalúa el valor y retorna Success o Failure."""

    def __call__(self, value: T) -> bool:
        return self.check(value).is_success

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self.description}>"

    @staticmethod
    def to(description: str, test: Callable[[T], bool]) -> Predicate[T]:
        """
        Construye un predicado a partir de una función booleana.

        Args:
            description: Frase verbal que describe la condición.
            test: Función pura valor -> bool.
        """
        return _FunctionPredicate(description, test)


@dataclass(frozen=True, repr=False)
class _FunctionPredicate(Predicate[T]):
    _description: str
    _test: Callable[[T], bool]

    @property
    def description(self) -> str:
        return self._description

    def check(self, value: T) -> Result:
        if self._test(value):
            return Success(value)
        return Failure(value, self._description)
