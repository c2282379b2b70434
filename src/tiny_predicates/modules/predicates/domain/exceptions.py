# src/tiny_predicates/modules/predicates/domain/exceptions.py
"""
Excepciones del dominio de Predicados.

Arquitectura: Domain Layer
Responsabilidad: Definir errores semánticos independientes de la infraestructura.
"""


class PredicateError(Exception):
    """Clase base para errores en el módulo de predicados."""

    pass


class InvalidArgumentError(PredicateError, ValueError):
    """Un valor no cumple los predicados exigidos por check()."""

    pass
