"""配置和 Schema 模块

提供运行配置模型、YAML 默认值文件加载与合并。
"""

from .schema import RunConfig, ExecutionMode, MODE_CHOICES
from .loader import (
    ConfigLoader,
    ConfigValidationError,
    ConfigError,
    load_defaults_file,
    build_run_config,
    config_loader,
)

__all__ = [
    # 主要类
    "RunConfig",
    "ExecutionMode",
    "MODE_CHOICES",
    "ConfigLoader",

    # 异常类
    "ConfigError",
    "ConfigValidationError",

    # 便捷函数
    "load_defaults_file",
    "build_run_config",

    # 单例
    "config_loader",
]
