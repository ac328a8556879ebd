#!/usr/bin/env python3
"""
TaskFlow 启动脚本

用法:
    python run.py                  # 生成10个随机任务并执行
    python run.py --count 5        # 生成5个任务
    python run.py --seed 42        # 固定随机种子
    python run.py --time-unit 0.1  # 每个时间单位0.1秒
"""

import argparse
import sys
from pathlib import Path

# 添加项目根目录到路径
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="TaskFlow 优先级任务调度器")
    parser.add_argument("--count", type=int, default=None, help="生成任务数量")
    parser.add_argument("--seed", type=int, default=None, help="随机种子")
    parser.add_argument("--max-duration", type=int, default=None, help="随机时长上限")
    parser.add_argument("--time-unit", type=float, default=None, help="一个时间单位对应的秒数")
    parser.add_argument("--config", default=None, help="YAML配置文件路径")
    parser.add_argument("--debug", action="store_true", help="调试模式")
    parser.add_argument("--strict", action="store_true", help="有任务失败时返回非零退出码")

    args = parser.parse_args(argv)

    from taskflow.config import TaskFlowConfig, get_config
    config = TaskFlowConfig.from_yaml(args.config) if args.config else get_config()

    scheduler_config = config.scheduler
    if args.time_unit is not None:
        scheduler_config = scheduler_config.model_copy(update={"time_unit_seconds": args.time_unit})

    generator_config = config.generator
    if args.max_duration is not None:
        generator_config = generator_config.model_copy(update={"max_duration": args.max_duration})

    # 初始化日志
    from taskflow.logging import setup_logging
    setup_logging(log_level="DEBUG" if args.debug else config.logging.level, config=config)

    from taskflow.generator import TaskGenerator
    from taskflow.reporter import ConsoleReporter
    from taskflow.scheduler import Scheduler

    reporter = ConsoleReporter()
    reporter.startup()

    scheduler = Scheduler(scheduler_config)
    reporter.attach(scheduler)

    count = args.count if args.count is not None else generator_config.task_count
    reporter.generating(count)

    generator = TaskGenerator(generator_config, scheduler_config, seed=args.seed)
    generator.populate(scheduler, count)

    report = scheduler.run_all()

    if args.strict and report.failed:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
