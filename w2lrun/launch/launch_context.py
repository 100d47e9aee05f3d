"""
启动上下文模块

定义启动流程中各步骤共享的数据结构和异常类。
"""

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..config.schema import RunConfig
from ..host.package_manager import Which
from ..host.runner import CommandRunner
from ..install.result import InstallResult
from .binary import W2LBinary


class LaunchError(Exception):
    """启动失败（致命，进程以 1 退出）"""
    pass


class BinaryNotFoundError(LaunchError):
    """window2linux 不存在或不可执行"""
    pass


class TargetResolutionError(LaunchError):
    """目标无法确定或不存在"""
    pass


@dataclass
class LaunchContext:
    """启动上下文

    config 在整个流程中不可变；其余字段由各步骤依次填充。
    """
    config: RunConfig
    runner: CommandRunner = field(default_factory=CommandRunner)
    which: Which = shutil.which
    home: Optional[Path] = None
    euid: Optional[int] = None

    binary: Optional[W2LBinary] = None
    install_result: Optional[InstallResult] = None
    target: Optional[Path] = None
    run_args: Optional[List[str]] = None
    exit_code: int = 0
    finished: bool = False

    def __post_init__(self):
        if self.binary is None:
            self.binary = W2LBinary(self.config.binary, self.runner)

    @property
    def target_argument(self) -> Optional[str]:
        """传给二进制的目标参数：显式目标保持用户输入原文"""
        if self.config.target is not None:
            return self.config.target
        return None if self.target is None else str(self.target)

    def finish(self, exit_code: int) -> None:
        """结束流程，后续步骤不再执行"""
        self.exit_code = exit_code
        self.finished = True
