"""
状态输出步骤

打印 window2linux 运行器状态与 gamescope 可用性，失败只警告。
"""

from ...utils.logging import status_logger
from ..launch_context import LaunchContext
from .launch_step import LaunchStep


class StatusStep(LaunchStep):
    """输出后端与工具状态"""

    def __init__(self):
        super().__init__("status", "输出运行器与 gamescope 状态")

    def execute(self, context: LaunchContext) -> None:
        returncode = context.binary.inspect_runners()
        if returncode != 0:
            status_logger.warning(f"Runner status probe failed (exit {returncode}).")

        gamescope = context.which("gamescope")
        if gamescope:
            status_logger.info(f"gamescope available: {gamescope}")
        else:
            status_logger.warning("gamescope not found on PATH.")


class SetupOnlyGateStep(LaunchStep):
    """--setup-only 时在此成功结束"""

    def __init__(self):
        super().__init__("setup-only", "检查是否仅执行环境准备")

    def execute(self, context: LaunchContext) -> None:
        if context.config.setup_only:
            status_logger.success("Setup checks finished.")
            context.finish(0)
