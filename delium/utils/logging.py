# delium/utils/logging.py
"""
Logging helpers (stdlib logging, one `delium` logger hierarchy)

Intent
- `get_logger(__name__)` everywhere; handlers live only on the `delium` root logger.
- `configure_logging_from_params(...)` wires level / optional log file from parameters.yaml.
- Fields passed through `extra={...}` are appended to the line as key=value pairs,
  so structured context stays visible without a JSON formatter.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional

ROOT_LOGGER_NAME = "delium"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Attributes every LogRecord has; anything else came from `extra=`.
_STANDARD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
    "taskName",
}


class ExtraFieldsFormatter(logging.Formatter):
    """Formatter that appends `extra=` fields as ` | k=v k=v`."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {k: v for k, v in vars(record).items() if k not in _STANDARD_ATTRS}
        if not extras:
            return base
        kv = " ".join(f"{k}={v!r}" for k, v in sorted(extras.items()))
        return f"{base} | {kv}"


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Return a logger under the `delium` hierarchy (module names are used as-is)."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    (Re)configure the `delium` root logger: stderr handler + optional file handler.

    Idempotent: existing handlers installed here are replaced, not duplicated.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    formatter = ExtraFieldsFormatter(LOG_FORMAT, DATE_FORMAT)

    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(formatter)
    root.addHandler(stream)

    if log_file:
        p = Path(log_file)
        p.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(p, encoding="utf-8")
        fh.setFormatter(formatter)
        root.addHandler(fh)

    root.setLevel(str(level).upper())
    root.propagate = False
    return root


def configure_logging_from_params(
    params: Any,
    *,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Configure logging from a ParametersConfig (explicit kwargs win over params.run)."""
    run = getattr(params, "run", None)
    lvl = level or getattr(run, "log_level", None) or "INFO"
    lf = log_file if log_file is not None else getattr(run, "log_file", None)
    return configure_logging(level=lvl, log_file=lf)


__all__ = [
    "ROOT_LOGGER_NAME",
    "ExtraFieldsFormatter",
    "get_logger",
    "configure_logging",
    "configure_logging_from_params",
]
