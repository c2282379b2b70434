# src/tiny_predicates/modules/predicates/infrastructure/observability.py
"""
Servicio de Observabilidad SRE: Logs, Latency & Saturation (RAM).
Soporta modo "Pretty Print" para depuración visual.

Principios:
1. Logs estructurados (JSON) para máquinas.
2. Logs legibles para humanos (LOG_FORMAT=PRETTY).
3. Contexto (correlation_id) en cada evento.
"""

import functools
import inspect
import json
import logging
import os
import sys
import time
import uuid
from typing import Any, Callable, Optional

import psutil

logger = logging.getLogger("tiny_predicates")


def configure_logging(level=logging.INFO, log_file: Optional[str] = None):
    """
    Configura el logger del paquete con salida a consola (y opcionalmente archivo).
    """
    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s", datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    # Limpiar handlers previos para evitar duplicados
    if logger.hasHandlers():
        logger.handlers.clear()

    logger.setLevel(level)
    logger.addHandler(console_handler)

    if log_file:
        # Formateador detallado para archivo (Forensics)
        file_formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
        )
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)

    logger.debug("🔭 Observabilidad iniciada (level=%s)", logging.getLevelName(level))


class ObservabilityService:

    # 🌍 CONFIGURACIÓN GLOBAL
    # Si esta variable de entorno existe, activamos la vista vertical
    PRETTY_PRINT = os.getenv("LOG_FORMAT") == "PRETTY"

    @staticmethod
    def get_correlation_id() -> str:
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_ram_usage_mb() -> float:
        try:
            process = psutil.Process(os.getpid())
            return round(process.memory_info().rss / 1024 / 1024, 2)
        except psutil.Error:
            return 0.0

    @staticmethod
    def log_event(
        event_name: str,
        correlation_id: str,
        payload: dict[str, Any],
        level: str = "INFO",
    ):
        """Emite un log estructurado en JSON (Horizontal o Vertical)."""

        log_entry = {
            "timestamp": time.time(),
            "level": level,
            "event": event_name,
            "correlation_id": correlation_id,
            "data": payload,
        }

        if ObservabilityService.PRETTY_PRINT:
            msg = json.dumps(log_entry, indent=4, default=str)
        else:
            msg = json.dumps(log_entry, default=str)

        if level == "ERROR":
            logger.error(msg)
        elif level == "DEBUG":
            logger.debug(msg)
        else:
            logger.info(msg)

    @staticmethod
    def measure_latency(operation_name: str, target_arg: Optional[str] = None):
        """
        Decorador: mide duración y RAM de una operación.

        Args:
            operation_name: Prefijo de los eventos (<op>.started, ...).
            target_arg: Nombre del parámetro de `func` cuyo valor se reporta
                como `target` (ej: "name"). Sin él, target = "unknown".
        """

        def decorator(func: Callable):
            signature = inspect.signature(func)

            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                start_time = time.time()
                start_ram = ObservabilityService._get_ram_usage_mb()
                correlation_id = ObservabilityService.get_correlation_id()

                target = "unknown"
                if target_arg is not None:
                    bound = signature.bind_partial(*args, **kwargs).arguments
                    target = str(bound.get(target_arg, "unknown"))

                ObservabilityService.log_event(
                    event_name=f"{operation_name}.started",
                    correlation_id=correlation_id,
                    payload={"target": target, "start_ram_mb": start_ram},
                )

                try:
                    result = func(*args, **kwargs)

                    end_time = time.time()
                    end_ram = ObservabilityService._get_ram_usage_mb()

                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.completed",
                        correlation_id=correlation_id,
                        payload={
                            "duration_sec": round(end_time - start_time, 3),
                            "end_ram_mb": end_ram,
                            "ram_delta_mb": round(end_ram - start_ram, 2),
                            "target": target,
                            "status": "success",
                        },
                    )
                    return result

                except Exception as e:
                    end_time = time.time()
                    crash_ram = ObservabilityService._get_ram_usage_mb()

                    ObservabilityService.log_event(
                        event_name=f"{operation_name}.failed",
                        correlation_id=correlation_id,
                        payload={
                            "duration_sec": round(end_time - start_time, 3),
                            "crash_ram_mb": crash_ram,
                            "target": target,
                            "error_type": type(e).__name__,
                            "error_msg": str(e),
                        },
                        level="ERROR",
                    )
                    raise

            return wrapper

        return decorator
