"""宿主机环境探测与命令执行"""

from .runner import CommandRunner, exit_status, EXIT_NOT_FOUND, EXIT_NOT_EXECUTABLE
from .package_manager import PackageManager, detect_package_manager
from .privilege import PrivilegeError, PrivilegeEscalator
from .proton import have_proton

__all__ = [
    "CommandRunner",
    "exit_status",
    "EXIT_NOT_FOUND",
    "EXIT_NOT_EXECUTABLE",
    "PackageManager",
    "detect_package_manager",
    "PrivilegeError",
    "PrivilegeEscalator",
    "have_proton",
]
