"""
随机任务生成

生成名称、优先级和时长随机的SimpleTask, 用于演示调度器
"""


from __future__ import annotations
import random
from typing import Iterator, Optional

from taskflow.config import GeneratorConfig, SchedulerConfig, get_config
from taskflow.scheduler.engine import Scheduler
from taskflow.schema.models import Priority
from taskflow.tasks.base import SimpleTask


class TaskGenerator:
    """
    随机任务生成器

    相同的seed产生相同的任务序列
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        scheduler_config: Optional[SchedulerConfig] = None,
        seed: Optional[int] = None,
    ):
        self.config = config or get_config().generator
        self.scheduler_config = scheduler_config or get_config().scheduler
        self.seed = seed if seed is not None else self.config.seed
        self._rng = random.Random(self.seed)

    def generate(self, count: Optional[int] = None) -> Iterator[tuple[Priority, SimpleTask]]:
        """
        生成任务

        Args:
            count: 任务数量, None时使用配置

        Yields:
            (优先级, 任务)
        """
        if count is None:
            count = self.config.task_count
        if count < 0:
            raise ValueError("任务数量不能为负数")

        for i in range(count):
            base_name = self._rng.choice(self.config.task_names)
            priority = self._rng.choice(list(Priority))
            duration = self._rng.randint(1, self.config.max_duration)

            task = SimpleTask(
                task_name=f"第 {i} 个任务 - {base_name}",
                duration=duration,
                max_duration=self.scheduler_config.max_task_duration,
                time_unit=self.scheduler_config.time_unit_seconds,
            )
            yield priority, task

    def populate(self, scheduler: Scheduler, count: Optional[int] = None) -> list[tuple[Priority, SimpleTask]]:
        """生成任务并加入调度器"""
        generated = list(self.generate(count))
        for priority, task in generated:
            scheduler.add_task(priority, task)
        return generated
