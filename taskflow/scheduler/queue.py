"""
任务队列

支持优先级调度的任务队列, 同优先级按入队顺序出队
"""


from __future__ import annotations
import heapq
from dataclasses import dataclass, field
from threading import Lock
from typing import Optional

from taskflow.schema.models import Priority
from taskflow.tasks.base import Executable


@dataclass(order=True, frozen=True)
class QueueEntry:
    """带优先级的任务包装"""
    sort_key: tuple[int, int] = field(init=False, repr=False)
    priority: Priority = field(compare=False)
    sequence: int = field(compare=False)
    task: Executable = field(compare=False)

    def __post_init__(self):
        # 堆顶为最高优先级, 同优先级序号小者在前
        object.__setattr__(self, "sort_key", (-int(self.priority), self.sequence))

    @property
    def name(self) -> str:
        return self.task.get_name()


class TaskQueue:
    """
    任务队列

    线程安全的优先级队列, 所有插入与取出都在锁内完成.
    关闭后拒绝插入, 关闭与最后一次空检查在同一次加锁中完成.
    """

    def __init__(self):
        self._queue: list[QueueEntry] = []
        self._lock = Lock()
        self._sequence = 0
        self._closed = False

    def put(self, priority: Priority, task: Executable) -> Optional[QueueEntry]:
        """
        添加任务到队列

        Args:
            priority: 优先级
            task: 任务对象

        Returns:
            新的队列项, 队列已关闭时返回None
        """
        with self._lock:
            if self._closed:
                return None

            entry = QueueEntry(priority=priority, sequence=self._sequence, task=task)
            self._sequence += 1
            heapq.heappush(self._queue, entry)
            return entry

    def get(self) -> Optional[QueueEntry]:
        """取出下一个任务"""
        with self._lock:
            if not self._queue:
                return None
            return heapq.heappop(self._queue)

    def get_or_close(self) -> Optional[QueueEntry]:
        """取出下一个任务, 队列为空时关闭队列并返回None"""
        with self._lock:
            if not self._queue:
                self._closed = True
                return None
            return heapq.heappop(self._queue)

    def peek(self) -> Optional[QueueEntry]:
        """查看下一个任务但不移除"""
        with self._lock:
            if not self._queue:
                return None
            return self._queue[0]

    def size(self) -> int:
        """获取队列大小"""
        with self._lock:
            return len(self._queue)

    def is_empty(self) -> bool:
        """检查队列是否为空"""
        return self.size() == 0

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def close(self) -> None:
        with self._lock:
            self._closed = True

    def list_entries(self) -> list[QueueEntry]:
        """按出队顺序列出所有待处理任务"""
        with self._lock:
            return sorted(self._queue)
