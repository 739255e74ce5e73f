from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterator

import pytest

from range_rover.util.config import create_default_range_rover_config


@pytest.fixture(name="seeded_random")
def seeded_random_fixture() -> random.Random:
    seeded_random = random.Random()
    seeded_random.seed(a=0, version=2)
    return seeded_random


@pytest.fixture
def tmp_range_rover_root(tmp_path: Path) -> Path:
    """
    Create a temp directory and populate it with an empty range_rover_root directory.
    """
    path: Path = tmp_path / "range_rover_root"
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def root_path_populated_with_config(tmp_range_rover_root: Path) -> Path:
    """
    Create a temp range_rover_root directory and populate it with a default config.yaml.
    Returns the range_rover_root path.
    """
    root_path: Path = tmp_range_rover_root
    create_default_range_rover_config(root_path)
    return root_path


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """
    Remove and close any handler a test attaches to the root logger and restore its level.
    """
    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in original_handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(original_level)
