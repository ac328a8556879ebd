"""
任务调度模块

负责:
- 任务优先级排序
- 任务顺序执行
- 任务结果上报
"""


from __future__ import annotations
from taskflow.scheduler.engine import Scheduler
from taskflow.scheduler.executor import TaskExecutor
from taskflow.scheduler.queue import QueueEntry, TaskQueue

__all__ = [
    "QueueEntry",
    "Scheduler",
    "TaskExecutor",
    "TaskQueue",
]
