# src/tiny_predicates/modules/predicates/application/use_cases.py
"""
Casos de Uso para la Evaluación de Valores.

Arquitectura: Application Layer
Responsabilidad: Evaluar un valor contra varios predicados y producir un reporte.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Sequence, Tuple

from tiny_predicates.core.predicate import Predicate
from tiny_predicates.modules.predicates.infrastructure.observability import ObservabilityService


@dataclass(frozen=True)
class Evaluation:
    """
    Reporte inmutable de una evaluación.

    `results` conserva el orden de los predicados: (descripción, pasó).
    """

    name: str
    value: Any
    results: Tuple[Tuple[str, bool], ...] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        return all(ok for _, ok in self.results)

    @property
    def failures(self) -> List[str]:
        return [description for description, ok in self.results if not ok]


class EvaluateValue:
    """
    Caso de Uso: Evaluar un valor nombrado contra una lista de predicados.

    A diferencia de check(), NO corta en el primer fallo: reporta todos.
    """

    def __init__(self, predicates: Sequence[Predicate[Any]]):
        if not predicates:
            raise ValueError("EvaluateValue necesita al menos un predicado")
        self._predicates = tuple(predicates)

    # ✅ Instrumentación: Medimos "Latency" y "Errors" automáticamente
    @ObservabilityService.measure_latency(
        operation_name="evaluate_value_use_case", target_arg="name"
    )
    def execute(self, name: str, value: Any) -> Evaluation:
        """
        Args:
            name: Nombre del valor (aparece en logs y reportes).
            value: Valor a evaluar.

        Returns:
            Evaluation con un resultado por predicado.
        """
        results = tuple((p.description, p(value)) for p in self._predicates)
        return Evaluation(name=name, value=value, results=results)
