"""
Runtime configuration for the mergeheap tools.

Values are plain module-level constants; a few can be overridden from the
environment so the CLI defaults follow the shell they run in:
- MERGEHEAP_KIND       default heap backend ("lazy", "unsorted" or "sorted")
- MERGEHEAP_LOG_LEVEL  logging level name used when --verbose is not given

An unrecognised override is reported with a warning and the built-in default
is used instead.
"""

import logging
import os

from .heaps import HEAP_KINDS

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _from_env(name: str, default: str, allowed, normalize=str) -> str:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = normalize(raw.strip())
    if value not in allowed:
        logger.warning("ignoring %s=%r (expected one of: %s); using %r",
                       name, raw, ", ".join(sorted(allowed)), default)
        return default
    return value


# Backend used when a command does not name one
DEFAULT_KIND = _from_env("MERGEHEAP_KIND", "lazy", HEAP_KINDS, str.lower)

LOG_LEVEL = _from_env("MERGEHEAP_LOG_LEVEL", "WARNING", LOG_LEVELS, str.upper)
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Benchmark defaults: sizes are BENCH_BASE_INPUT * 2**i for i < BENCH_STEPS
BENCH_BASE_INPUT = 100
BENCH_STEPS = 6
BENCH_ITERATIONS = 5
