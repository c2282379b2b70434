# tests/conftest.py
import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """
    configure_logging() engancha handlers al logger del paquete;
    los limpiamos para que no apunten a streams ya cerrados por capsys.
    """
    yield
    package_logger = logging.getLogger("tiny_predicates")
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
