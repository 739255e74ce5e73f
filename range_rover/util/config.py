from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Union, cast

import importlib_resources
import yaml

from range_rover.util.default_root import resolve_root_path
from range_rover.util.errors import ConfigError

log = logging.getLogger(__name__)

REQUIRED_LOGGING_KEYS = ["log_stdout", "log_filename", "log_level"]


def initial_config_file(filename: Union[str, Path]) -> str:
    initial_config_path = importlib_resources.files(__name__.rpartition(".")[0]).joinpath(f"initial-{filename}")
    contents: str = initial_config_path.read_text(encoding="utf-8")
    return contents


def config_path_for_filename(root_path: Optional[Path], filename: Union[str, Path]) -> Path:
    """
    Config files live in <root>/config/. Without a root path RANGE_ROVER_ROOT or ~/.range_rover is used.
    """
    path_filename = Path(filename)
    if path_filename.is_absolute():
        return path_filename
    return resolve_root_path(override=root_path) / "config" / filename


def create_default_range_rover_config(root_path: Optional[Path] = None, filenames: Optional[List[str]] = None) -> None:
    if filenames is None:
        filenames = ["config.yaml"]
    for filename in filenames:
        default_config_file_data: str = initial_config_file(filename)
        path: Path = config_path_for_filename(root_path, filename)
        tmp_path: Path = path.with_suffix("." + str(os.getpid()))
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp_path, "w") as f:
            f.write(default_config_file_data)
        try:
            os.replace(str(tmp_path), str(path))
        except PermissionError:
            shutil.move(str(tmp_path), str(path))


def save_config(root_path: Optional[Path], filename: Union[str, Path], config_data: Any) -> None:
    path: Path = config_path_for_filename(root_path, filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.TemporaryDirectory(dir=path.parent) as tmp_dir:
        tmp_path: Path = Path(tmp_dir) / Path(filename).name
        with open(tmp_path, "w") as f:
            yaml.safe_dump(config_data, f)
        try:
            os.replace(str(tmp_path), path)
        except PermissionError:
            shutil.move(str(tmp_path), str(path))


def load_config(
    root_path: Optional[Path],
    filename: Union[str, Path],
    sub_config: Optional[str] = None,
) -> Dict[str, Any]:
    path = config_path_for_filename(root_path, filename)
    if not path.is_file():
        raise ConfigError(f"Config not found: {path}")

    try:
        with open(path) as opened_config_file:
            r = yaml.safe_load(opened_config_file)
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing {path}: {e}") from e

    if not isinstance(r, dict):
        log.error(f"yaml.safe_load did not return a mapping: {path}")
        raise ConfigError(f"Config is not a mapping: {path}")

    if sub_config is not None:
        sub = r.get(sub_config)
        if not isinstance(sub, dict):
            raise ConfigError(f"Missing section {sub_config!r} in {path}")
        r = sub
    return cast(Dict[str, Any], r)


def validate_logging_config(logging_config: Dict[str, Any]) -> None:
    missing = [key for key in REQUIRED_LOGGING_KEYS if key not in logging_config]
    if len(missing) > 0:
        raise ConfigError("Invalid logging config", [f"missing {key!r}" for key in missing])
