"""
路径工具

提供路径展开、默认二进制位置、可执行检查等工具函数。
"""

import os
import shutil
import sys
from pathlib import Path
from typing import Optional, Union

BINARY_NAME = "window2linux"


def expand_path(path: Union[str, Path]) -> Path:
    """扩展路径（处理环境变量和用户目录），不解析符号链接

    Args:
        path: 原始路径

    Returns:
        Path: 扩展后的路径
    """
    if isinstance(path, str):
        path = os.path.expandvars(path)
        path = os.path.expanduser(path)
    return Path(path)


def launcher_dir() -> Path:
    """启动器入口脚本所在目录"""
    entry = sys.argv[0] if sys.argv and sys.argv[0] else "."
    return Path(entry).resolve().parent


def default_binary_path() -> Path:
    """默认的 window2linux 位置

    优先使用启动器同目录下的二进制，其次 PATH 中的同名命令；
    都不存在时仍返回同目录路径，由后续检查报错。
    """
    local = launcher_dir() / BINARY_NAME
    if local.exists():
        return local

    found = shutil.which(BINARY_NAME)
    if found:
        return Path(found)

    return local


def default_wine_prefix(home: Optional[Path] = None) -> Path:
    """Wine 前缀目录：$WINEPREFIX，否则 ~/.wine"""
    prefix = os.environ.get("WINEPREFIX")
    if prefix:
        return expand_path(prefix)
    return (home or Path.home()) / ".wine"


def is_executable_file(path: Union[str, Path]) -> bool:
    """检查路径是否为可执行的普通文件"""
    path = Path(path)
    return path.is_file() and os.access(path, os.X_OK)
