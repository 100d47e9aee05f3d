"""
子进程执行

所有外部命令（包管理器、window2linux）都经由 CommandRunner 执行，
测试中可替换为记录调用的假实现。
"""

import subprocess
from typing import List, Sequence

from ..utils.logging import debug

# 与 shell 约定一致的退出码
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127


def exit_status(returncode: int) -> int:
    """子进程返回码转换为进程退出码（被信号 N 终止时为 128+N）"""
    if returncode < 0:
        return 128 + (-returncode)
    return returncode


class CommandRunner:
    """同步执行外部命令，阻塞直到结束，不设超时"""

    def __init__(self):
        self.history: List[List[str]] = []

    def run(self, argv: Sequence[str], quiet: bool = False) -> int:
        """执行命令并返回退出码

        Args:
            argv: 命令及参数
            quiet: 丢弃 stdout/stderr

        Returns:
            int: 退出码；命令无法启动时为 126/127
        """
        argv = [str(arg) for arg in argv]
        self.history.append(argv)
        debug(f"exec: {' '.join(argv)}")

        output = subprocess.DEVNULL if quiet else None
        try:
            result = subprocess.run(argv, stdout=output, stderr=output, check=False)
        except FileNotFoundError:
            debug(f"command not found: {argv[0]}")
            return EXIT_NOT_FOUND
        except PermissionError:
            debug(f"command not executable: {argv[0]}")
            return EXIT_NOT_EXECUTABLE
        except OSError as e:
            debug(f"command failed to start: {argv[0]}: {e}")
            return EXIT_NOT_EXECUTABLE

        return exit_status(result.returncode)
