"""
目标解析器

未显式指定目标时，在 Wine 前缀中查找 PowerPoint：先检查 Office 默认
安装位置，再在 drive_c 下递归、不区分大小写地按文件名搜索。
搜索结果按目录遍历顺序取第一个匹配，不排序。
"""

import os
from pathlib import Path
from typing import List, Optional, Union

from ..utils.logging import resolve_logger

DEFAULT_EXECUTABLE = "POWERPNT.EXE"

OFFICE_INSTALL_DIRS = [
    "Program Files/Microsoft Office/root/Office16",
    "Program Files (x86)/Microsoft Office/root/Office16",
]

NO_TARGET_MESSAGE = "No target provided and auto-detection failed. Pass a .exe/.msi path."


class TargetResolver:
    """目标解析器"""

    def __init__(self, wine_prefix: Path, executable_name: str = DEFAULT_EXECUTABLE):
        self.wine_prefix = Path(wine_prefix)
        self.executable_name = executable_name

    @property
    def drive_c(self) -> Path:
        return self.wine_prefix / "drive_c"

    def candidates(self) -> List[Path]:
        """按优先级排列的默认安装路径"""
        return [self.drive_c / directory / self.executable_name for directory in OFFICE_INSTALL_DIRS]

    def resolve(self, explicit: Optional[Union[str, Path]] = None) -> Optional[Path]:
        """解析目标路径

        Args:
            explicit: 用户指定的目标，原样返回

        Returns:
            Optional[Path]: 目标路径，找不到时为 None
        """
        if explicit is not None:
            return Path(explicit)

        for candidate in self.candidates():
            if candidate.is_file():
                resolve_logger.info(f"Auto-detected PowerPoint executable: {candidate}")
                return candidate

        detected = self.search()
        if detected is not None:
            resolve_logger.info(f"Detected PowerPoint executable by search: {detected}")
        return detected

    def search(self) -> Optional[Path]:
        """在 drive_c 下递归搜索（不跟随符号链接，忽略无权限目录）"""
        if not self.drive_c.is_dir():
            return None

        wanted = self.executable_name.lower()
        for dirpath, _dirnames, filenames in os.walk(self.drive_c):
            for name in filenames:
                if name.lower() != wanted:
                    continue
                path = Path(dirpath) / name
                if path.is_file() and not path.is_symlink():
                    return path
        return None
