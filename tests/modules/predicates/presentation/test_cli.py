# tests/modules/predicates/presentation/test_cli.py
"""
Tests para: CLI de predicados
Tipo: Unitario (Presentation)
"""
import argparse
import json
import math

import pytest

from tiny_predicates.modules.predicates.presentation import cli

# === parse_number ===

@pytest.mark.parametrize("text, expected", [("5", 5), ("-5", -5), ("2.5", 2.5), ("inf", math.inf)])
def test_parse_number(text, expected):
    assert cli.parse_number(text) == expected

def test_parse_number_keeps_int_type():
    assert isinstance(cli.parse_number("5"), int)

def test_parse_number_nan():
    assert math.isnan(cli.parse_number("nan"))

def test_parse_number_rejects_text():
    with pytest.raises(argparse.ArgumentTypeError):
        cli.parse_number("diez")

# === build_predicates ===

def test_build_predicates_from_flags():
    args = cli.setup_parser().parse_args(["7", "--lte", "10", "--range", "1", "9", "--integer"])

    descriptions = [p.description for p in cli.build_predicates(args)]

    assert descriptions == [
        "either be less than 10 or be equal to 10",
        "either be greater than 1 or be equal to 1 and either be less than 9 or be equal to 9",
        "be an integer",
    ]

# === main ===

def test_main_exit_code_zero_when_all_pass(capsys):
    assert cli.main(["10", "--lte", "10", "--json"]) == 0

    report = json.loads(capsys.readouterr().out)
    assert report["passed"] is True
    assert report["results"] == [
        {"predicate": "either be less than 10 or be equal to 10", "passed": True}
    ]

def test_main_exit_code_one_when_any_fails(capsys):
    assert cli.main(["10.000001", "--lte", "10", "--name", "Limit", "--json"]) == 1

    report = json.loads(capsys.readouterr().out)
    assert report["name"] == "Limit"
    assert report["passed"] is False

def test_main_accepts_negative_values(capsys):
    assert cli.main(["-6", "--lte", "-5", "--json"]) == 0

def test_main_text_output_lists_failures(capsys):
    assert cli.main(["12", "--name", "Age", "--lte", "10", "--gt", "0"]) == 1

    out = capsys.readouterr().out
    assert "Age should either be less than 10 or be equal to 10" in out

def test_main_requires_a_predicate():
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["10"])
    assert exc_info.value.code == 2

# === Nombres con sintaxis de markup (rich) ===

def test_main_text_output_escapes_bracketed_name(capsys):
    """
    Given: Un --name con corchetes que rich interpretaría como markup
    When: Se ejecuta la CLI en modo texto
    Then: No explota y el nombre sale literal
    """
    assert cli.main(["12", "--name", "Weird[/]", "--lte", "10"]) == 1

    out = capsys.readouterr().out
    assert "Weird[/] should either be less than 10 or be equal to 10" in out

def test_main_text_output_escapes_bracketed_name_on_success(capsys):
    assert cli.main(["5", "--name", "[bold]Age", "--lte", "10"]) == 0

    assert "[bold]Age = 5" in capsys.readouterr().out

# === Valores negativos que argparse confundiría con flags ===

@pytest.mark.parametrize("text, expected", [("-inf", -math.inf), ("-1e3", -1000.0)])
def test_main_accepts_non_integer_negatives_after_double_dash(capsys, text, expected):
    """
    Given: Un valor como -inf o -1e3
    When: Se pasa tras '--'
    Then: Se evalúa como número (no como opción desconocida)
    """
    assert cli.main(["--lte", "10", "--json", "--", text]) == 0

    report = json.loads(capsys.readouterr().out)
    assert report["passed"] is True
    assert float(report["value"]) == expected

def test_main_accepts_negative_bound_with_equals_syntax(capsys):
    assert cli.main(["-1000", "--lte=-inf", "--json"]) == 1

    report = json.loads(capsys.readouterr().out)
    assert report["results"] == [
        {"predicate": "either be less than -inf or be equal to -inf", "passed": False}
    ]

def test_epilog_documents_negative_values():
    assert "--lte=-inf" in cli.setup_parser().format_help()

# === Modo --strict (check) ===

def test_main_strict_reports_first_failure(capsys):
    """
    Given: --strict y un valor que incumple dos predicados
    When: Se ejecuta la CLI
    Then: Sale con 1 y muestra el mensaje de check() del primer fallo
    """
    assert cli.main(["12.5", "--name", "Age", "--lte", "10", "--integer", "--strict"]) == 1

    out = capsys.readouterr().out
    assert "Age should either be less than 10 or be equal to 10" in out
    assert "be an integer" not in out

def test_main_strict_passes(capsys):
    assert cli.main(["7", "--name", "Age[/]", "--lte", "10", "--strict"]) == 0

    assert "Age[/] = 7" in capsys.readouterr().out

# === JSON estricto ===

def _reject_constant(token):
    raise ValueError(f"token JSON no estándar: {token}")

@pytest.mark.parametrize("text", ["nan", "inf"])
def test_main_json_output_is_strict_json(capsys, text):
    """
    Given: Un valor no finito
    When: Se pide salida --json
    Then: No aparecen NaN/Infinity desnudos (jq los rechaza)
    """
    cli.main([text, "--lte", "10", "--json"])

    report = json.loads(capsys.readouterr().out, parse_constant=_reject_constant)
    assert report["value"] == text
