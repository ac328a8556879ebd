"""
任务模块
"""


from __future__ import annotations
from taskflow.tasks.base import MAX_TASK_DURATION, CallableTask, Executable, SimpleTask

__all__ = [
    "MAX_TASK_DURATION",
    "CallableTask",
    "Executable",
    "SimpleTask",
]
