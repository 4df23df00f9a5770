"""
Core configuration for the simple_svg package.
Holds process-wide settings and a lightweight timing context manager.
"""

import os
import time
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    """Read an integer setting from the environment, falling back on bad input."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer value for {name}: {raw!r}")
        return default


# Global configuration settings
CONFIG: Dict[str, Any] = {
    # Logging
    "log_level": os.environ.get("SIMPLE_SVG_LOG_LEVEL", "INFO"),

    # Serialization
    "number_precision": _env_int("SIMPLE_SVG_PRECISION", 2),

    # Demo output
    "default_output": os.environ.get("SIMPLE_SVG_OUTPUT", "my_svg.svg"),

    # Performance settings
    "enable_profiling": False,
}


class Profiler:
    """Context manager measuring wall-clock time of a block."""

    def __init__(self, name: str, enabled: Optional[bool] = None):
        self.name = name
        self.enabled = CONFIG["enable_profiling"] if enabled is None else enabled
        self.start_time: Optional[float] = None
        self.elapsed: float = 0.0

    def __enter__(self) -> "Profiler":
        self.start_time = time.perf_counter()
        if self.enabled:
            logger.debug(f"Profiling started: {self.name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time is None:
            return
        self.elapsed = time.perf_counter() - self.start_time
        if self.enabled:
            logger.debug(f"Profiling completed: {self.name} - {self.elapsed:.6f}s")

    @property
    def elapsed_ms(self) -> float:
        """Elapsed time in milliseconds."""
        return self.elapsed * 1000.0


def configure(settings: Dict[str, Any]) -> None:
    """
    Update the package configuration with custom settings.

    Args:
        settings: Dictionary of configuration settings to update
    """
    CONFIG.update(settings)
    logger.info(f"Configuration updated: {', '.join(settings.keys())}")


__all__ = [
    "CONFIG",
    "Profiler",
    "configure",
]
