"""通用工具模块"""

from .logging import (
    configure_logging,
    get_stage_logger,
    StageLogger,
    LogStage,
    OutputLevel,
    install_logger,
    status_logger,
    resolve_logger,
    launch_logger,
)

from .paths import (
    BINARY_NAME,
    expand_path,
    launcher_dir,
    default_binary_path,
    default_wine_prefix,
    is_executable_file,
)

__all__ = [
    # 日志相关
    "configure_logging",
    "get_stage_logger",
    "StageLogger",
    "LogStage",
    "OutputLevel",
    "install_logger",
    "status_logger",
    "resolve_logger",
    "launch_logger",

    # 路径相关
    "BINARY_NAME",
    "expand_path",
    "launcher_dir",
    "default_binary_path",
    "default_wine_prefix",
    "is_executable_file",
]
