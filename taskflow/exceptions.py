"""
TaskFlow 统一异常定义

所有项目级别的异常都从TaskFlowError继承
任务执行失败属于封闭的TaskError家族, 调度器按任务逐个上报
"""


from __future__ import annotations
from typing import Any


class TaskFlowError(Exception):
    """TaskFlow基础异常"""

    def __init__(self, message: str, code: str = "TASKFLOW_ERROR", details: dict[str, Any] | None = None):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class TaskError(TaskFlowError):
    """
    任务执行异常

    只有三种具体类型: ExecutionError / TaskTimeoutError / TaskNotFoundError
    """

    def __init__(self, message: str, code: str = "TASK_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message=message, code=code, details=details)


class ExecutionError(TaskError):
    """运行错误: 任务本身失败或被策略拒绝"""

    def __init__(self, reason: str, details: dict[str, Any] | None = None):
        self.reason = reason
        super().__init__(
            message=f"执行任务失败: {reason}",
            code="EXECUTION_ERROR",
            details={"reason": reason, **(details or {})},
        )


class TaskTimeoutError(TaskError):
    """任务超时"""

    def __init__(self, timeout_seconds: float | None = None):
        self.timeout_seconds = timeout_seconds
        details = {} if timeout_seconds is None else {"timeout_seconds": timeout_seconds}
        super().__init__(message="任务超时", code="TASK_TIMEOUT", details=details)


class TaskNotFoundError(TaskError):
    """找不到任务"""

    def __init__(self, task_name: str | None = None):
        self.task_name = task_name
        details = {} if task_name is None else {"task_name": task_name}
        super().__init__(message="找不到任务", code="TASK_NOT_FOUND", details=details)


# 封闭的任务错误集合
TASK_ERROR_TYPES: tuple[type[TaskError], ...] = (
    ExecutionError,
    TaskTimeoutError,
    TaskNotFoundError,
)


class SchedulerClosedError(TaskFlowError):
    """调度器已执行完毕, 不可再使用"""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            message=f"调度器已耗尽, 无法执行 {operation}",
            code="SCHEDULER_CLOSED",
            details={"operation": operation},
        )


class ConfigError(TaskFlowError):
    """配置相关异常"""

    def __init__(self, config_path: str, message: str):
        self.config_path = config_path
        super().__init__(
            message=f"配置错误 [{config_path}]: {message}",
            code="CONFIG_ERROR",
            details={"config_path": config_path},
        )
