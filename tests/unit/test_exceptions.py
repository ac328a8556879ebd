"""
异常单元测试
"""

import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from taskflow.exceptions import (
    TASK_ERROR_TYPES,
    ConfigError,
    ExecutionError,
    SchedulerClosedError,
    TaskError,
    TaskFlowError,
    TaskNotFoundError,
    TaskTimeoutError,
)


def describe(error: TaskError) -> str:
    match error:
        case ExecutionError(reason=reason):
            return f"execution:{reason}"
        case TaskTimeoutError():
            return "timeout"
        case TaskNotFoundError():
            return "not_found"
    return "unknown"


class TestTaskErrors:
    """测试任务错误家族"""

    def test_closed_family(self):
        """测试错误类型集合"""
        assert set(TASK_ERROR_TYPES) == {ExecutionError, TaskTimeoutError, TaskNotFoundError}
        for error_type in TASK_ERROR_TYPES:
            assert issubclass(error_type, TaskError)
            assert issubclass(error_type, TaskFlowError)

    def test_messages(self):
        """测试错误信息格式"""
        assert str(ExecutionError("拒绝")) == "执行任务失败: 拒绝"
        assert str(TaskTimeoutError()) == "任务超时"
        assert str(TaskNotFoundError()) == "找不到任务"

    def test_codes(self):
        """测试错误码"""
        assert ExecutionError("x").code == "EXECUTION_ERROR"
        assert TaskTimeoutError(3.0).code == "TASK_TIMEOUT"
        assert TaskNotFoundError("a").code == "TASK_NOT_FOUND"

    def test_pattern_matching(self):
        """测试按类型匹配"""
        assert describe(ExecutionError("坏了")) == "execution:坏了"
        assert describe(TaskTimeoutError()) == "timeout"
        assert describe(TaskNotFoundError()) == "not_found"

    def test_to_dict(self):
        """测试转换为字典"""
        data = TaskTimeoutError(2.5).to_dict()
        assert data == {
            "error": "TASK_TIMEOUT",
            "message": "任务超时",
            "details": {"timeout_seconds": 2.5},
        }


class TestOtherErrors:
    """测试其他异常"""

    def test_scheduler_closed(self):
        """测试调度器关闭异常"""
        error = SchedulerClosedError("add_task")
        assert error.operation == "add_task"
        assert error.code == "SCHEDULER_CLOSED"
        assert not isinstance(error, TaskError)

    def test_config_error(self):
        """测试配置异常"""
        error = ConfigError("configs/x.yaml", "格式错误")
        assert "configs/x.yaml" in str(error)
        assert error.details["config_path"] == "configs/x.yaml"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
