from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, Union


def resolve_root_path(*, override: Optional[Path]) -> Path:
    candidates: List[Optional[Union[str, Path]]] = [
        override,
        os.environ.get("RANGE_ROVER_ROOT"),
        "~/.range_rover",
    ]

    for candidate in candidates:
        if candidate is not None:
            return Path(candidate).expanduser().resolve()

    raise RuntimeError("unreachable: last candidate is hardcoded to be found")
