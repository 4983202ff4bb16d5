"""
结构化日志
库代码只通过 get_logger 取日志器，由调用方（如 CLI）决定是否调用 configure_logging
"""

from __future__ import annotations

import logging
import sys
from typing import Any, List

import structlog


def _build_processors(json_output: bool, colors: bool) -> List[Any]:
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colors))
    return processors


def configure_logging(verbose: bool = False, json_output: bool = False) -> None:
    """初始化结构化日志，输出到 stderr，避免干扰命令输出。"""
    log_level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(level=log_level, format="%(message)s", stream=sys.stderr)

    structlog.configure(
        processors=_build_processors(json_output, colors=sys.stderr.isatty()),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None, **context: Any) -> Any:
    """获取日志器，可附带固定上下文字段"""
    logger = structlog.get_logger(name) if name else structlog.get_logger()
    return logger.bind(**context) if context else logger
