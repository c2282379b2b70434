# src/tiny_predicates/modules/predicates/application/check.py
"""
Guard clause check().

Arquitectura: Application Layer
Responsabilidad: Validar un valor nombrado contra predicados y fallar con un
mensaje legible ("Age should be less than 150").
"""
from __future__ import annotations

import logging
from typing import TypeVar

from tiny_predicates.core.predicate import Predicate
from tiny_predicates.modules.predicates.domain.combinators import and_
from tiny_predicates.modules.predicates.domain.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def check(name: str, value: T, *predicates: Predicate[T]) -> T:
    """
    Verifica que `value` cumpla todos los predicados.

    Args:
        name: Nombre del valor, usado en el mensaje de error.
        value: Valor a validar.
        *predicates: Al menos un predicado.

    Returns:
        El mismo `value`, para poder encadenar: self.age = check("Age", age, ...)

    Raises:
        InvalidArgumentError: Si algún predicado falla.
        ValueError: Si no se pasa ningún predicado.
    """
    result = and_(*predicates).check(value)

    if not result.is_success:
        message = f"{name} should {result.description}"
        logger.debug("check failed: %s (value=%r)", message, value)
        raise InvalidArgumentError(message)

    return value
