"""启动流程模块"""

from .launch_context import (
    LaunchContext,
    LaunchError,
    BinaryNotFoundError,
    TargetResolutionError,
)
from .binary import W2LBinary
from .resolver import TargetResolver, DEFAULT_EXECUTABLE, NO_TARGET_MESSAGE
from .pipeline import LaunchPipeline

__all__ = [
    "LaunchContext",
    "LaunchError",
    "BinaryNotFoundError",
    "TargetResolutionError",
    "W2LBinary",
    "TargetResolver",
    "DEFAULT_EXECUTABLE",
    "NO_TARGET_MESSAGE",
    "LaunchPipeline",
]
