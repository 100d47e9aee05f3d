"""依赖安装模块"""

from .installer import DependencyInstaller, MANUAL_INSTALL_HINT
from .plans import InstallPlan, INSTALL_PLANS, get_install_plan
from .result import CommandGroup, CommandOutcome, InstallResult, InstallStatus

__all__ = [
    "DependencyInstaller",
    "MANUAL_INSTALL_HINT",
    "InstallPlan",
    "INSTALL_PLANS",
    "get_install_plan",
    "CommandGroup",
    "CommandOutcome",
    "InstallResult",
    "InstallStatus",
]
