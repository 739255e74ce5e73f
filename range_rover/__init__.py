from __future__ import annotations

import importlib.metadata

__version__: str
try:
    __version__ = importlib.metadata.version("range-rover")
except importlib.metadata.PackageNotFoundError:
    # package is not installed
    __version__ = "unknown"

from range_rover.core.range_rover import missed_in_range, range_rover  # noqa: E402
from range_rover.core.range_tree import RangeTree  # noqa: E402
from range_rover.types.inclusive_range import InclusiveRange  # noqa: E402

__all__ = ["InclusiveRange", "RangeTree", "missed_in_range", "range_rover"]
