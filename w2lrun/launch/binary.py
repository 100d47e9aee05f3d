"""
window2linux 二进制封装

启动器只向二进制传递参数并读取退出码，其内部行为不可见。
"""

import os
from pathlib import Path
from typing import List, Sequence

from ..host.runner import CommandRunner
from ..utils.paths import is_executable_file

INSPECT_RUNNERS_ARGS = ["inspect", "runners", "--json"]


class W2LBinary:
    """外部 window2linux 可执行文件"""

    def __init__(self, path: Path, runner: CommandRunner):
        # 无目录部分的相对路径会被 exec 按 PATH 查找，统一转为绝对路径
        self.path = Path(os.path.abspath(path))
        self.runner = runner

    def is_available(self) -> bool:
        return is_executable_file(self.path)

    def inspect_runners(self) -> int:
        """打印运行器状态（输出直接透传到终端）"""
        return self.runner.run(self.command(INSPECT_RUNNERS_ARGS))

    def run(self, args: Sequence[str]) -> int:
        return self.runner.run(self.command(args))

    def command(self, args: Sequence[str]) -> List[str]:
        return [str(self.path)] + [str(arg) for arg in args]
