from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional


class Err(Enum):
    UNKNOWN = 1

    # caller supplied bound has start > end
    INVALID_BOUND = 2
    # value cannot be represented by the tree's sized integer domain
    VALUE_OUT_OF_DOMAIN = 3
    INVALID_CONFIG = 4


class RangeRoverError(Exception):
    def __init__(self, code: Err, error_msg: str = ""):
        super().__init__(f"Error code: {code.name} {error_msg}")
        self.code = code
        self.error_msg = error_msg


class InvalidBoundError(RangeRoverError):
    def __init__(self, start: Any, end: Any) -> None:
        super().__init__(Err.INVALID_BOUND, f"bound start {start} is greater than bound end {end}")
        self.start = start
        self.end = end


class DomainError(RangeRoverError, ValueError):
    def __init__(self, value: Any, domain: type) -> None:
        super().__init__(Err.VALUE_OUT_OF_DOMAIN, f"{value} does not fit into {domain.__name__}")
        self.value = value
        self.domain = domain


class ConfigError(RangeRoverError):
    def __init__(self, error_msg: str, problems: Optional[List[str]] = None) -> None:
        if problems is None:
            problems = []
        if len(problems) > 0:
            error_msg = f"{error_msg}: {', '.join(problems)}"
        super().__init__(Err.INVALID_CONFIG, error_msg)
        self.problems = list(problems)
