"""
权限提升

安装命令需要 root：已是 root 时直接执行，否则仅在 sudo 无需交互时使用 sudo。
"""

import os
from typing import List, Optional

from .runner import CommandRunner

ROOT_REQUIRED_MESSAGE = (
    "Root privileges are required for package installation. "
    "Re-run with: sudo w2lrun --setup-only"
)


class PrivilegeError(Exception):
    """无法获得 root 权限"""
    pass


class PrivilegeEscalator:
    """计算安装命令的提权前缀（结果缓存）"""

    def __init__(self, runner: CommandRunner, euid: Optional[int] = None):
        self.runner = runner
        self.euid = os.geteuid() if euid is None else euid
        self._prefix: Optional[List[str]] = None

    def prefix(self) -> List[str]:
        """返回命令前缀

        Raises:
            PrivilegeError: 非 root 且 sudo 需要交互或不可用
        """
        if self._prefix is not None:
            return list(self._prefix)

        if self.euid == 0:
            self._prefix = []
        elif self.runner.run(["sudo", "-n", "true"], quiet=True) == 0:
            self._prefix = ["sudo"]
        else:
            raise PrivilegeError(ROOT_REQUIRED_MESSAGE)

        return list(self._prefix)

    def wrap(self, argv: List[str]) -> List[str]:
        return self.prefix() + list(argv)
