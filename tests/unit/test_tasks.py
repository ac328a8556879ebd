"""
任务单元测试
"""

import threading
import time

import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from taskflow.exceptions import ExecutionError, TaskNotFoundError
from taskflow.logging import logger
from taskflow.tasks.base import MAX_TASK_DURATION, CallableTask, Executable, SimpleTask


class TestSimpleTask:
    """测试定时任务"""

    def test_get_name(self):
        """测试名称访问"""
        task = SimpleTask(task_name="数据同步", duration=1, time_unit=0)
        assert task.get_name() == "数据同步"
        assert task.name == "数据同步"
        assert isinstance(task, Executable)

    def test_default_threshold(self):
        """测试默认阈值"""
        task = SimpleTask(task_name="缓存清理", duration=1)
        assert task.max_duration == MAX_TASK_DURATION == 5

    def test_within_threshold_succeeds(self):
        """测试阈值以内的任务成功并阻塞对应时长"""
        task = SimpleTask(task_name="邮件发送", duration=5, time_unit=0.02)
        start = time.monotonic()
        task.execute()
        assert time.monotonic() - start >= 0.09

    def test_over_threshold_rejected_without_blocking(self):
        """测试超过阈值的任务被拒绝且不阻塞"""
        task = SimpleTask(task_name="安全审计", duration=20, time_unit=1.0)
        start = time.monotonic()
        with pytest.raises(ExecutionError) as exc_info:
            task.execute()
        assert time.monotonic() - start < 1.0
        assert "过长" in str(exc_info.value)
        assert exc_info.value.details["duration"] == 20

    def test_custom_threshold(self):
        """测试自定义阈值"""
        task = SimpleTask(task_name="日志压缩", duration=3, max_duration=2, time_unit=0)
        with pytest.raises(ExecutionError):
            task.execute()

    def test_empty_name_rejected(self):
        """测试空名称"""
        with pytest.raises(ValueError):
            SimpleTask(task_name="", duration=1)

    def test_negative_duration_rejected(self):
        """测试负时长"""
        with pytest.raises(ValueError):
            SimpleTask(task_name="前端构建", duration=-1)

    def test_immutable(self):
        """测试任务不可变"""
        task = SimpleTask(task_name="系统扫描", duration=1)
        with pytest.raises(AttributeError):
            task.duration = 2

    def test_options_keyword_only(self):
        """测试阈值与时间单位只能以关键字传入"""
        with pytest.raises(TypeError):
            SimpleTask("系统扫描", 1, 3)
        task = SimpleTask("系统扫描", 1, max_duration=3, time_unit=0)
        assert (task.max_duration, task.time_unit) == (3, 0)

    def test_logs_running_line(self):
        """测试执行前输出正在运行的任务"""
        messages = []
        handler_id = logger.add(lambda msg: messages.append(msg.record["message"]), level="DEBUG")
        try:
            with pytest.raises(ExecutionError):
                SimpleTask(task_name="数据同步", duration=9, time_unit=0).execute()
        finally:
            logger.remove(handler_id)
        assert "正在运行任务: 数据同步" in messages


class TestCallableTask:
    """测试函数任务"""

    def test_runs_function(self):
        """测试执行函数"""
        calls = []
        task = CallableTask("记录", lambda: calls.append(threading.current_thread().name))
        task.execute()
        assert len(calls) == 1

    def test_wraps_unexpected_exception(self):
        """测试普通异常被包装为ExecutionError"""
        def boom():
            raise RuntimeError("磁盘已满")

        task = CallableTask("写文件", boom)
        with pytest.raises(ExecutionError) as exc_info:
            task.execute()
        assert exc_info.value.reason == "磁盘已满"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_task_error_passes_through(self):
        """测试任务错误原样抛出"""
        def missing():
            raise TaskNotFoundError("配置文件")

        task = CallableTask("读配置", missing)
        with pytest.raises(TaskNotFoundError):
            task.execute()

    def test_repr(self):
        """测试repr包含名称"""
        task = CallableTask("空任务", lambda: None)
        assert "空任务" in repr(task)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
