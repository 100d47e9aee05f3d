"""启动步骤"""

from .launch_step import LaunchStep
from .binary_check_step import BinaryCheckStep
from .install_step import DependencyInstallStep
from .status_step import StatusStep, SetupOnlyGateStep
from .target_step import TargetResolveStep, TargetVerifyStep
from .dispatch_step import DispatchStep

__all__ = [
    "LaunchStep",
    "BinaryCheckStep",
    "DependencyInstallStep",
    "StatusStep",
    "SetupOnlyGateStep",
    "TargetResolveStep",
    "TargetVerifyStep",
    "DispatchStep",
]
