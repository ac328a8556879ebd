"""
统一日志模块

基于loguru实现:
- 彩色控制台输出
- 日志轮转
- 错误日志分离
- 任务日志追踪
"""


from __future__ import annotations
import sys
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from taskflow.config import TaskFlowConfig, get_config

# 移除默认handler
logger.remove()

# 日志格式
LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)

LOG_FORMAT_FILE = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{name}:{function}:{line} | "
    "{message}"
)

_handler_ids: list[int] = []


def setup_logging(
    log_dir: Optional[Path] = None,
    log_level: str = "INFO",
    console: bool = True,
    file_output: Optional[bool] = None,
    config: Optional[TaskFlowConfig] = None,
) -> None:
    """
    配置日志系统

    重复调用时先移除上一次添加的handler

    Args:
        log_dir: 日志目录
        log_level: 日志级别
        console: 是否输出到控制台
        file_output: 是否写日志文件, None时按配置决定
        config: 已加载的配置, None时使用get_config()
    """
    config = config or get_config()

    for handler_id in _handler_ids:
        logger.remove(handler_id)
    _handler_ids.clear()

    if file_output is None:
        file_output = config.logging.file_output

    # 控制台输出
    if console:
        _handler_ids.append(logger.add(
            sys.stderr,
            format=LOG_FORMAT,
            level=log_level,
            colorize=True,
        ))

    if not file_output:
        return

    if log_dir is None:
        log_dir = config.get_logs_path()

    log_dir.mkdir(parents=True, exist_ok=True)

    # 主日志文件
    _handler_ids.append(logger.add(
        log_dir / "taskflow.log",
        format=LOG_FORMAT_FILE,
        level=log_level,
        rotation=config.logging.rotation,
        retention=config.logging.retention,
        encoding="utf-8",
    ))

    # 错误日志单独文件
    _handler_ids.append(logger.add(
        log_dir / "errors.log",
        format=LOG_FORMAT_FILE,
        level="ERROR",
        rotation=config.logging.rotation,
        retention=config.logging.retention,
        encoding="utf-8",
    ))

    logger.debug(f"日志系统初始化完成, 日志目录: {log_dir}")


def get_logger(name: str = __name__) -> Any:
    """获取logger实例"""
    return logger.bind(name=name)


class TaskLogger:
    """
    任务日志记录器

    绑定任务名称与优先级, 便于按任务过滤
    """

    def __init__(self, task_name: str, priority: str):
        self.task_name = task_name
        self.priority = priority
        self._logger = logger.bind(task_name=task_name, priority=priority)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._logger.exception(message, **kwargs)


__all__ = [
    "logger",
    "get_logger",
    "setup_logging",
    "TaskLogger",
]
