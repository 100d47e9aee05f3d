"""
安装结果

安装是尽力而为的：结果以三态表示，由调用方决定如何处理。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..host.package_manager import PackageManager


class InstallStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"


class CommandGroup(str, Enum):
    MANDATORY = "mandatory"
    COMPOSITOR = "compositor"
    DISTRIBUTION_CLIENT = "distribution_client"


@dataclass(frozen=True)
class CommandOutcome:
    """单条安装命令的执行结果"""
    group: CommandGroup
    argv: List[str]
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass
class InstallResult:
    """依赖安装结果"""
    status: InstallStatus
    manager: Optional[PackageManager] = None
    outcomes: List[CommandOutcome] = field(default_factory=list)
    message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.status == InstallStatus.SUCCESS

    @property
    def failed(self) -> bool:
        return self.status == InstallStatus.FAILED

    @property
    def skipped(self) -> bool:
        return self.status == InstallStatus.SKIPPED

    def failed_commands(self, group: Optional[CommandGroup] = None) -> List[CommandOutcome]:
        return [
            outcome for outcome in self.outcomes
            if not outcome.ok and (group is None or outcome.group == group)
        ]

    @classmethod
    def skipped_because(cls, message: str, manager: Optional[PackageManager] = None) -> "InstallResult":
        return cls(status=InstallStatus.SKIPPED, manager=manager, message=message)
