"""
统一数据模型定义

优先级与任务状态使用枚举, 执行结果使用Pydantic v2定义
"""


from __future__ import annotations
from datetime import datetime
from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, Field


class Priority(IntEnum):
    """
    任务优先级

    数值越大优先级越高: HIGH > MEDIUM > LOW
    """
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, value: "Priority | str") -> "Priority":
        """从名称解析优先级, 不区分大小写"""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"未知优先级: {value!r}")


class TaskStatus(str, Enum):
    """任务在调度器中的生命周期"""
    QUEUED = "queued"
    DRAINING = "draining"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class TaskOutcome(BaseModel):
    """单个任务的执行结果"""
    name: str
    priority: Priority
    status: TaskStatus
    sequence: int  # 入队序号
    error_code: Optional[str] = None
    error_message: str = ""
    started_at: datetime = Field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None

    @property
    def success(self) -> bool:
        return self.status == TaskStatus.SUCCEEDED

    @property
    def duration_ms(self) -> float:
        if self.completed_at is None:
            return 0
        return (self.completed_at - self.started_at).total_seconds() * 1000


class RunReport(BaseModel):
    """一次run_all的汇总结果, outcomes按执行顺序排列"""
    outcomes: list[TaskOutcome] = Field(default_factory=list)
    started_at: datetime = Field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.success)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    def names(self) -> list[str]:
        """按执行顺序返回任务名称"""
        return [o.name for o in self.outcomes]

    def failures(self) -> list[TaskOutcome]:
        """返回所有失败的结果"""
        return [o for o in self.outcomes if not o.success]
