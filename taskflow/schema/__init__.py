"""
数据模型模块
"""


from __future__ import annotations
from taskflow.schema.models import Priority, RunReport, TaskOutcome, TaskStatus

__all__ = [
    "Priority",
    "RunReport",
    "TaskOutcome",
    "TaskStatus",
]
