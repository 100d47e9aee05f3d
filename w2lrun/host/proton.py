"""
Proton 运行时探测

启发式检查：已知命令名 + Steam 安装目录中的 Proton（含 GE 版本）。
允许漏报。
"""

import glob
import shutil
from pathlib import Path
from typing import Callable, List, Optional

PROTON_COMMANDS = ["proton", "proton-run", "proton-ge"]

# 相对 $HOME 的 Steam 根目录（原生安装、旧式链接、Flatpak）
STEAM_ROOTS = [
    ".steam/steam",
    ".local/share/Steam",
    ".var/app/com.valvesoftware.Steam/.local/share/Steam",
]

PROTON_GLOBS = [
    "steamapps/common/Proton */proton",
    "steamapps/common/Proton-*GE*/proton",
    "compatibilitytools.d/GE-Proton*/proton",
]


def steam_roots(home: Optional[Path] = None) -> List[Path]:
    home = home or Path.home()
    return [home / root for root in STEAM_ROOTS]


def have_proton(
    home: Optional[Path] = None,
    which: Callable[[str], Optional[str]] = shutil.which,
) -> bool:
    """是否已有可用的 Proton 运行时"""
    if any(which(command) for command in PROTON_COMMANDS):
        return True

    for root in steam_roots(home):
        if not root.is_dir():
            continue
        for pattern in PROTON_GLOBS:
            if glob.glob(str(Path(glob.escape(str(root))) / pattern)):
                return True

    return False
