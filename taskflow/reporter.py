"""
控制台状态输出

订阅调度器回调, 通过logger输出任务的添加、执行与结果
"""


from __future__ import annotations
from typing import Any

from taskflow.exceptions import TaskError
from taskflow.logging import get_logger
from taskflow.scheduler.engine import Scheduler
from taskflow.schema.models import Priority, RunReport, TaskOutcome
from taskflow.tasks.base import Executable

BANNER_START = "--- TaskFlow 开始 ---"
BANNER_DONE = "--- 所有任务执行完毕 ---"


class ConsoleReporter:
    """控制台状态输出"""

    def __init__(self, log: Any = None):
        self.log = log or get_logger(__name__)

    def attach(self, scheduler: Scheduler) -> "ConsoleReporter":
        """注册到调度器的所有事件"""
        scheduler.register_callback("on_added", self.task_added)
        scheduler.register_callback("on_run_start", self.run_started)
        scheduler.register_callback("on_task_start", self.task_started)
        scheduler.register_callback("on_task_success", self.task_succeeded)
        scheduler.register_callback("on_task_error", self.task_failed)
        scheduler.register_callback("on_run_complete", self.run_completed)
        return self

    def startup(self) -> None:
        self.log.info(BANNER_START)

    def generating(self, count: int) -> None:
        self.log.info(f"--- 开始随机生成 {count} 个任务")

    def task_added(self, priority: Priority, task: Executable) -> None:
        duration = getattr(task, "duration", None)
        if duration is None:
            estimate = "未知"
        else:
            estimate = f"{duration * getattr(task, 'time_unit', 1.0):g}s"
        self.log.info(f"已添加任务: {task.get_name()} | 优先级: {priority.label} | 预估时间: {estimate}")

    def run_started(self, count: int) -> None:
        self.log.info(f"--- 调度器开始工作, 待处理任务总数: {count}")

    def task_started(self, priority: Priority, task: Executable) -> None:
        self.log.info(f"[{priority.label}] 准备运行: {task.get_name()}")

    def task_succeeded(self, outcome: TaskOutcome) -> None:
        self.log.success(f"Successfully Finished: {outcome.name}")

    def task_failed(self, outcome: TaskOutcome, error: TaskError) -> None:
        self.log.error(f"Error running: {outcome.name} {error}")

    def run_completed(self, report: RunReport) -> None:
        self.log.info(BANNER_DONE)
        self.log.info(f"成功 {report.succeeded} 个, 失败 {report.failed} 个")
