"""
任务执行器

封装单个任务的执行逻辑, 把任务抛出的异常转换为执行结果
"""


from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from taskflow.exceptions import ExecutionError, TaskError
from taskflow.logging import TaskLogger
from taskflow.scheduler.queue import QueueEntry
from taskflow.schema.models import TaskOutcome, TaskStatus


@dataclass
class ExecutionResult:
    """执行结果与对应的任务错误"""
    outcome: TaskOutcome
    error: Optional[TaskError] = None


class TaskExecutor:
    """
    任务执行器

    任务失败不会向外抛出, 只体现在结果中
    """

    def execute(self, entry: QueueEntry) -> ExecutionResult:
        """
        执行一个队列项

        Args:
            entry: 已出队的队列项

        Returns:
            执行结果
        """
        task_log = TaskLogger(entry.name, entry.priority.label)
        outcome = TaskOutcome(
            name=entry.name,
            priority=entry.priority,
            status=TaskStatus.DRAINING,
            sequence=entry.sequence,
        )
        error: Optional[TaskError] = None

        try:
            entry.task.execute()
        except TaskError as e:
            error = e
        except Exception as e:
            error = ExecutionError(str(e) or type(e).__name__)
            task_log.exception(f"任务抛出未预期的异常 [{entry.name}]: {e}")

        outcome.completed_at = datetime.now()
        if error is None:
            outcome.status = TaskStatus.SUCCEEDED
        else:
            outcome.status = TaskStatus.FAILED
            outcome.error_code = error.code
            outcome.error_message = error.message

        task_log.debug(f"任务结束 [{entry.name}]: {outcome.status.value}, 耗时 {outcome.duration_ms:.0f}ms")
        return ExecutionResult(outcome=outcome, error=error)
