"""
调度引擎

核心调度器, 负责:
- 多生产者并发添加任务
- 按优先级从高到低取出任务
- 在单个工作线程中顺序执行
- 逐个上报任务结果
"""


from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from threading import Lock
from typing import Callable, Optional

from taskflow.config import SchedulerConfig, get_config
from taskflow.exceptions import SchedulerClosedError
from taskflow.logging import get_logger
from taskflow.scheduler.executor import TaskExecutor
from taskflow.scheduler.queue import QueueEntry, TaskQueue
from taskflow.schema.models import Priority, RunReport
from taskflow.tasks.base import Executable

logger = get_logger(__name__)

EVENTS = (
    "on_added",
    "on_run_start",
    "on_task_start",
    "on_task_success",
    "on_task_error",
    "on_run_complete",
)


class Scheduler:
    """
    优先级任务调度器

    add_task可被任意线程并发调用; run_all是终止操作,
    执行完毕后调度器不可再使用
    """

    def __init__(self, config: Optional[SchedulerConfig] = None):
        self.config = config or get_config().scheduler
        self._queue = TaskQueue()
        self._executor = TaskExecutor()
        self._callbacks: dict[str, list[Callable]] = {event: [] for event in EVENTS}
        self._run_lock = Lock()
        self._started = False

    def register_callback(self, event: str, callback: Callable) -> None:
        """注册回调"""
        if event not in self._callbacks:
            raise ValueError(f"未知事件: {event}")
        self._callbacks[event].append(callback)

    def _emit(self, event: str, *args) -> None:
        """触发回调"""
        for callback in self._callbacks[event]:
            try:
                callback(*args)
            except Exception as e:
                logger.error(f"回调执行失败 [{event}]: {e}")

    @property
    def closed(self) -> bool:
        return self._queue.closed

    def add_task(self, priority: Priority | str, task: Executable) -> None:
        """
        添加任务

        Args:
            priority: 优先级或优先级名称
            task: 任务对象, 入队后归调度器所有

        Raises:
            SchedulerClosedError: 调度器已执行完毕
        """
        priority = Priority.parse(priority)
        if not isinstance(task, Executable):
            raise TypeError(f"任务必须实现Executable接口: {type(task).__name__}")

        entry = self._queue.put(priority, task)
        if entry is None:
            raise SchedulerClosedError("add_task")

        logger.debug(f"任务入队 [{entry.name}] 优先级={priority.label} 序号={entry.sequence}")
        self._emit("on_added", priority, task)

    def pending_count(self) -> int:
        """待处理任务数"""
        return self._queue.size()

    def snapshot(self) -> list[tuple[Priority, str]]:
        """按出队顺序列出待处理任务"""
        return [(e.priority, e.name) for e in self._queue.list_entries()]

    def run_all(self) -> RunReport:
        """
        执行所有任务

        在单个工作线程中按优先级顺序取出并执行任务, 调用方阻塞直至队列为空.
        执行期间新加入的任务也会在本次执行.

        Returns:
            按执行顺序排列的结果汇总

        Raises:
            SchedulerClosedError: 调度器已执行完毕
        """
        with self._run_lock:
            if self._started:
                raise SchedulerClosedError("run_all")
            self._started = True

        with ThreadPoolExecutor(
            max_workers=1,
            thread_name_prefix=self.config.worker_thread_name,
        ) as pool:
            return pool.submit(self._drain).result()

    def _drain(self) -> RunReport:
        """工作线程: 取出并执行任务直至队列为空"""
        report = RunReport()
        pending = self._queue.size()
        logger.debug(f"调度器开始工作, 待处理任务总数: {pending}")
        self._emit("on_run_start", pending)

        try:
            while True:
                entry = self._queue.get_or_close()
                if entry is None:
                    break
                self._run_entry(entry, report)
        finally:
            # 异常中断时同样关闭队列, 之后的add_task会被拒绝
            self._queue.close()

        report.completed_at = datetime.now()
        logger.debug(f"所有任务执行完毕: 成功 {report.succeeded}, 失败 {report.failed}")
        self._emit("on_run_complete", report)
        return report

    def _run_entry(self, entry: QueueEntry, report: RunReport) -> None:
        self._emit("on_task_start", entry.priority, entry.task)

        result = self._executor.execute(entry)
        report.outcomes.append(result.outcome)

        if result.error is None:
            self._emit("on_task_success", result.outcome)
        else:
            self._emit("on_task_error", result.outcome, result.error)
