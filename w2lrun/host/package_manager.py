"""
包管理器探测

按固定优先级探测宿主机的包管理器家族。
"""

import shutil
from enum import Enum
from typing import Callable, Optional

Which = Callable[[str], Optional[str]]


class PackageManager(str, Enum):
    """包管理器家族"""
    APT = "apt"
    DNF = "dnf"
    PACMAN = "pacman"
    ZYPPER = "zypper"
    UNKNOWN = "unknown"


# 探测顺序即优先级
PROBE_ORDER = [
    (PackageManager.APT, "apt-get"),
    (PackageManager.DNF, "dnf"),
    (PackageManager.PACMAN, "pacman"),
    (PackageManager.ZYPPER, "zypper"),
]


def detect_package_manager(which: Which = shutil.which) -> PackageManager:
    """返回第一个在 PATH 中找到命令的包管理器家族"""
    for manager, command in PROBE_ORDER:
        if which(command):
            return manager
    return PackageManager.UNKNOWN
