"""
任务基类定义

所有可调度的任务必须继承Executable并实现:
1. execute() -> None, 失败时抛出TaskError
2. get_name() -> str
"""


from __future__ import annotations
import time
from abc import ABC, abstractmethod
from dataclasses import KW_ONLY, dataclass, field
from typing import Callable

from taskflow.exceptions import ExecutionError, TaskError
from taskflow.logging import get_logger

logger = get_logger(__name__)

# 默认拒绝阈值 (时间单位)
MAX_TASK_DURATION = 5


class Executable(ABC):
    """可执行任务接口"""

    @abstractmethod
    def execute(self) -> None:
        """
        同步执行任务, 可能阻塞调用线程

        Raises:
            TaskError: 任务失败
        """

    @abstractmethod
    def get_name(self) -> str:
        """任务名称"""

    @property
    def name(self) -> str:
        return self.get_name()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.get_name()!r})"


@dataclass(frozen=True, repr=False)
class SimpleTask(Executable):
    """
    定时任务

    声明的时长超过max_duration时直接拒绝, 不执行实际工作
    """
    task_name: str
    duration: int
    _: KW_ONLY
    max_duration: int = MAX_TASK_DURATION
    time_unit: float = 1.0  # 一个时间单位对应的秒数

    def __post_init__(self):
        if not self.task_name:
            raise ValueError("任务名称不能为空")
        if self.duration < 0:
            raise ValueError("任务时长不能为负数")

    def execute(self) -> None:
        logger.debug(f"正在运行任务: {self.task_name}")
        if self.duration > self.max_duration:
            raise ExecutionError(
                "任务需要运行时间过长, 系统拒绝",
                details={"duration": self.duration, "max_duration": self.max_duration},
            )

        time.sleep(self.duration * self.time_unit)

    def get_name(self) -> str:
        return self.task_name


@dataclass(frozen=True, repr=False)
class CallableTask(Executable):
    """包装任意无参函数的任务"""
    task_name: str
    func: Callable[[], object] = field(compare=False)

    def __post_init__(self):
        if not self.task_name:
            raise ValueError("任务名称不能为空")

    def execute(self) -> None:
        try:
            self.func()
        except TaskError:
            raise
        except Exception as e:
            raise ExecutionError(str(e) or type(e).__name__) from e

    def get_name(self) -> str:
        return self.task_name
