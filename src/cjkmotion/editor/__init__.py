"""Editor package containing selection models and host implementations."""

from importlib import import_module
from typing import Any

from . import buffer, document_model, host

__all__ = ["buffer", "document_model", "host"]


def __getattr__(name: str) -> Any:
    # the Qt host pulls in PySide6; load it only on demand
    if name == "qt_host":
        module = import_module(f"{__name__}.{name}")
        globals()[name] = module
        return module
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
