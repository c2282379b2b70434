# src/tiny_predicates/modules/predicates/presentation/cli.py
"""
Interfaz de Línea de Comandos (CLI) para Evaluar Predicados.

Arquitectura: Presentation Layer (Interface Adapter)
Responsabilidad:
    1. Parsear argumentos (argv).
    2. Construir los predicados (Composition Root).
    3. Formatear la salida (JSON / tabla rich).
"""

import argparse
import json
import logging
import math
import sys
from typing import Any, List, Optional, Union

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tiny_predicates.core.predicate import Predicate
from tiny_predicates.modules.predicates.application.check import check
from tiny_predicates.modules.predicates.application.use_cases import Evaluation, EvaluateValue
from tiny_predicates.modules.predicates.domain.comparison import (
    is_equal_to,
    is_greater_than,
    is_greater_than_or_equal_to,
    is_in_range,
    is_integer,
    is_less_than,
    is_less_than_or_equal_to,
)
from tiny_predicates.modules.predicates.domain.exceptions import PredicateError
from tiny_predicates.modules.predicates.infrastructure.observability import configure_logging


def parse_number(text: str) -> Union[int, float]:
    """'5' -> 5, '5.0' -> 5.0, 'nan' / 'inf' -> float."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"no es un número: {text!r}") from None


def setup_parser() -> argparse.ArgumentParser:
    """Configura los argumentos aceptados por la herramienta."""
    parser = argparse.ArgumentParser(
        prog="tiny-predicates",
        description="🔎 Tiny Predicates - Evalúa un número contra predicados",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Ejemplo: tiny-predicates 42 --name Age --gte 0 --lte 150\n"
            "Negativos como -inf o -1e3: usar --lte=-inf o '--' antes del valor\n"
            "  (ej: tiny-predicates --lte 10 -- -inf)"
        ),
    )

    parser.add_argument("value", type=parse_number, help="Valor numérico a evaluar")
    parser.add_argument("--name", default="value", help="Nombre del valor (default: value)")

    parser.add_argument("--lt", type=parse_number, action="append", default=[], help="Menor que N")
    parser.add_argument("--lte", type=parse_number, action="append", default=[], help="Menor o igual que N")
    parser.add_argument("--gt", type=parse_number, action="append", default=[], help="Mayor que N")
    parser.add_argument("--gte", type=parse_number, action="append", default=[], help="Mayor o igual que N")
    parser.add_argument("--eq", type=parse_number, action="append", default=[], help="Igual a N")
    parser.add_argument(
        "--range",
        type=parse_number,
        nargs=2,
        metavar=("LOW", "HIGH"),
        action="append",
        default=[],
        help="Dentro de [LOW, HIGH] (inclusive)",
    )
    parser.add_argument("--integer", action="store_true", help="Debe ser entero")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Guard clause: corta en el primer predicado que falla (usa check())",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Salida en formato JSON (útil para tuberías/pipes)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Muestra logs detallados",
    )

    return parser


def build_predicates(args: argparse.Namespace) -> List[Predicate]:
    """Traduce los flags a predicados, en un orden estable."""
    predicates: List[Predicate] = []
    predicates += [is_less_than(n) for n in args.lt]
    predicates += [is_less_than_or_equal_to(n) for n in args.lte]
    predicates += [is_greater_than(n) for n in args.gt]
    predicates += [is_greater_than_or_equal_to(n) for n in args.gte]
    predicates += [is_equal_to(n) for n in args.eq]
    predicates += [is_in_range(low, high) for low, high in args.range]
    if args.integer:
        predicates.append(is_integer())
    return predicates


def _json_value(value: Any) -> Any:
    # JSON estricto (jq) no admite NaN/Infinity: van como string
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    return value


def format_output_json(evaluation: Evaluation) -> str:
    return json.dumps(
        {
            "name": evaluation.name,
            "value": _json_value(evaluation.value),
            "passed": evaluation.passed,
            "results": [
                {"predicate": description, "passed": ok}
                for description, ok in evaluation.results
            ],
        },
        indent=2,
        allow_nan=False,
    )


def format_output_text(evaluation: Evaluation, console: Console):
    """Presentación amigable para humanos."""
    name = escape(evaluation.name)
    table = Table(title=f"{name} = {evaluation.value}", show_header=True, header_style="bold")
    table.add_column("Predicado")
    table.add_column("Resultado", justify="center")

    for description, ok in evaluation.results:
        table.add_row(f"should {escape(description)}", "[green]✅ OK[/]" if ok else "[red]❌ FALLA[/]")

    console.print(table)

    if evaluation.passed:
        console.print("[bold green]Todos los predicados se cumplen.[/]")
    else:
        for description in evaluation.failures:
            console.print(f"[red]{name} should {escape(description)}[/]")


def main(argv: Optional[List[str]] = None) -> int:
    parser = setup_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    predicates = build_predicates(args)
    if not predicates:
        parser.error("indica al menos un predicado (--lt, --lte, --gt, --gte, --eq, --range, --integer)")

    console = Console()

    if args.strict:
        try:
            check(args.name, args.value, *predicates)
        except PredicateError as e:
            console.print(f"[bold red]Error:[/] {escape(str(e))}")
            return 1
        console.print(f"[bold green]{escape(args.name)} = {args.value} cumple todos los predicados.[/]")
        return 0

    evaluation = EvaluateValue(predicates).execute(args.name, args.value)

    if args.json:
        print(format_output_json(evaluation))
    else:
        format_output_text(evaluation, console)

    return 0 if evaluation.passed else 1


if __name__ == "__main__":
    sys.exit(main())
