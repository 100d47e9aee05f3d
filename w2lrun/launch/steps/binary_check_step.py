"""
二进制检查步骤
"""

from ...utils.logging import debug, LogStage
from ..launch_context import BinaryNotFoundError, LaunchContext
from .launch_step import LaunchStep


class BinaryCheckStep(LaunchStep):
    """确认 window2linux 存在且可执行"""

    def __init__(self):
        super().__init__("binary", "检查 window2linux 二进制")

    def execute(self, context: LaunchContext) -> None:
        binary = context.binary
        if not binary.is_available():
            raise BinaryNotFoundError(f"Binary not found or not executable: {binary.path}")
        debug(f"Using binary: {binary.path}", stage=LogStage.BINARY)
