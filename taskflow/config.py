"""
TaskFlow 配置中心

统一管理所有配置:
- 调度器配置 (scheduler)
- 任务生成配置 (generator)
- 日志配置 (logging)
"""


from __future__ import annotations
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from taskflow.exceptions import ConfigError

# 项目根目录
PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_TASK_NAMES = [
    "系统扫描", "数据同步", "邮件发送", "缓存清理",
    "安全审计", "日志压缩", "前端构建", "AI 模型推理",
]


class SchedulerConfig(BaseModel):
    """调度器配置"""
    max_task_duration: int = Field(default=5, ge=0)  # 超过该时长的任务被拒绝
    time_unit_seconds: float = Field(default=1.0, ge=0)  # 一个时间单位对应的秒数
    worker_thread_name: str = "taskflow_worker_"


class GeneratorConfig(BaseModel):
    """任务生成配置"""
    task_count: int = Field(default=10, ge=0)
    max_duration: int = Field(default=10, ge=1)
    task_names: list[str] = Field(default_factory=lambda: list(DEFAULT_TASK_NAMES))
    seed: Optional[int] = None

    @field_validator("task_names")
    @classmethod
    def validate_names(cls, v: list[str]) -> list[str]:
        if not v or any(not name.strip() for name in v):
            raise ValueError("任务名称列表不能为空, 且名称不能为空字符串")
        return v


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = "INFO"
    rotation: str = "10 MB"
    retention: str = "30 days"
    log_dir: str = "logs"
    file_output: bool = False


class TaskFlowConfig(BaseSettings):
    """TaskFlow主配置"""

    app_name: str = "TaskFlow"
    version: str = "1.0.0"
    env: str = "development"

    scheduler: SchedulerConfig = Field(default_factory=SchedulerConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="TASKFLOW_",
        env_nested_delimiter="__",
    )

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "TaskFlowConfig":
        """从YAML文件加载配置"""
        config_path = Path(config_path)
        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(str(config_path), f"YAML解析失败: {e}") from e

        if not isinstance(config_data, dict):
            raise ConfigError(str(config_path), "顶层必须是映射")

        try:
            return cls(**config_data)
        except ValidationError as e:
            raise ConfigError(str(config_path), f"{e.error_count()} 个字段校验失败") from e

    def get_path(self, relative_path: str) -> Path:
        """获取相对于项目根目录的绝对路径"""
        return PROJECT_ROOT / relative_path

    def get_logs_path(self) -> Path:
        """获取日志目录路径"""
        return self.get_path(self.logging.log_dir)


@lru_cache()
def get_config() -> TaskFlowConfig:
    """获取配置单例"""
    config_path = os.environ.get("TASKFLOW_CONFIG", "configs/taskflow.yaml")
    return TaskFlowConfig.from_yaml(PROJECT_ROOT / config_path)


def reload_config() -> TaskFlowConfig:
    """重新加载配置"""
    get_config.cache_clear()
    return get_config()
