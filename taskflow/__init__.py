"""
TaskFlow - 单进程优先级任务调度器

模块列表:
- tasks: 可执行任务接口与实现
- scheduler: 优先级队列、执行器与调度引擎
- reporter: 控制台状态输出
- generator: 随机任务生成
"""

from __future__ import annotations

# 版本
__version__ = "1.0.0"

from taskflow.exceptions import (
    ExecutionError,
    SchedulerClosedError,
    TaskError,
    TaskFlowError,
    TaskNotFoundError,
    TaskTimeoutError,
)
from taskflow.schema.models import Priority, RunReport, TaskOutcome, TaskStatus
from taskflow.tasks.base import CallableTask, Executable, SimpleTask
from taskflow.scheduler.engine import Scheduler

__all__ = [
    # 异常
    "ExecutionError",
    "SchedulerClosedError",
    "TaskError",
    "TaskFlowError",
    "TaskNotFoundError",
    "TaskTimeoutError",

    # 数据模型
    "Priority",
    "RunReport",
    "TaskOutcome",
    "TaskStatus",

    # 任务
    "CallableTask",
    "Executable",
    "SimpleTask",

    # 调度
    "Scheduler",
]
