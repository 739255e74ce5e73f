from __future__ import annotations

import logging
import os
from logging.handlers import SysLogHandler
from pathlib import Path
from typing import Any, Dict, List, Optional, cast

import colorlog
from concurrent_log_handler import ConcurrentRotatingFileHandler

from range_rover import __version__
from range_rover.util.config import validate_logging_config
from range_rover.util.default_root import resolve_root_path
from range_rover.util.path import path_from_root

default_log_level = "WARNING"
log_date_format = "%Y-%m-%dT%H:%M:%S"


def get_file_log_handler(
    formatter: logging.Formatter, root_path: Path, logging_config: Dict[str, object]
) -> ConcurrentRotatingFileHandler:
    log_path = path_from_root(root_path, str(logging_config.get("log_filename", "log/range_rover.log")))
    log_path.parent.mkdir(parents=True, exist_ok=True)
    maxrotation = cast(int, logging_config.get("log_maxfilesrotation", 7))
    maxbytesrotation = cast(int, logging_config.get("log_maxbytesrotation", 50 * 1024 * 1024))
    use_gzip = cast(bool, logging_config.get("log_use_gzip", False))
    handler = ConcurrentRotatingFileHandler(
        os.fspath(log_path), "a", maxBytes=maxbytesrotation, backupCount=maxrotation, use_gzip=use_gzip
    )
    handler.setFormatter(formatter)
    return handler


def get_stdout_log_handler(service_name: str) -> logging.Handler:
    name_length = 33 - len(service_name)
    stdout_handler = colorlog.StreamHandler()
    stdout_handler.setFormatter(
        colorlog.ColoredFormatter(
            f"%(asctime)s.%(msecs)03d {__version__} {service_name} %(name)-{name_length}s: "
            f"%(log_color)s%(levelname)-8s%(reset)s %(message)s",
            datefmt=log_date_format,
            reset=True,
        )
    )
    return stdout_handler


def initialize_logging(service_name: str, logging_config: Dict[str, Any], root_path: Path) -> List[logging.Handler]:
    """
    Attach handlers for ``service_name`` to the root logger, as described by a ``logging`` config section.
    Returns the handlers that were added.
    """
    validate_logging_config(logging_config)
    log_level = logging_config.get("log_level", default_log_level)
    name_length = 33 - len(service_name)
    file_log_formatter = logging.Formatter(
        fmt=f"%(asctime)s.%(msecs)03d {__version__} {service_name} %(name)-{name_length}s: %(levelname)-8s %(message)s",
        datefmt=log_date_format,
    )
    handlers: List[logging.Handler] = []
    if logging_config["log_stdout"]:
        handlers.append(get_stdout_log_handler(service_name))
    else:
        handlers.append(get_file_log_handler(file_log_formatter, root_path, logging_config))

    if logging_config.get("log_syslog", False):
        log_syslog_host = logging_config.get("log_syslog_host", "localhost")
        log_syslog_port = logging_config.get("log_syslog_port", 514)
        log_syslog_handler = SysLogHandler(address=(log_syslog_host, log_syslog_port))
        log_syslog_handler.setFormatter(logging.Formatter(fmt=f"{service_name} %(message)s", datefmt=log_date_format))
        handlers.append(log_syslog_handler)

    root_logger = logging.getLogger()
    for handler in handlers:
        root_logger.addHandler(handler)

    set_log_level(log_level=log_level, service_name=service_name)
    return handlers


def set_log_level(log_level: str, service_name: str) -> List[str]:
    root_logger = logging.getLogger()
    log_level_exceptions = {}

    for handler in root_logger.handlers:
        try:
            handler.setLevel(log_level)
        except (TypeError, ValueError) as e:
            handler.setLevel(default_log_level)
            log_level_exceptions[handler] = e

    error_strings = [
        f"Handler {handler}: Invalid log level '{log_level}' for {service_name}. "
        f"Defaulting to: {default_log_level}. Error: {exception}"
        for handler, exception in log_level_exceptions.items()
    ]
    for error_string in error_strings:
        root_logger.error(error_string)

    # The root logger defaults to WARNING which would hide records meant for handlers with a lower level
    if len(root_logger.handlers) > 0:
        root_logger.setLevel(min(handler.level for handler in root_logger.handlers))

    return error_strings


def initialize_service_logging(
    service_name: str, config: Dict[str, Any], root_path: Optional[Path] = None
) -> List[logging.Handler]:
    return initialize_logging(
        service_name=service_name,
        logging_config=config[service_name]["logging"],
        root_path=resolve_root_path(override=root_path),
    )
