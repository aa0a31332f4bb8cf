"""httphelpers Logging — logging port and structlog adapter."""

from httphelpers.logging.port import LoggingPort
from httphelpers.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
