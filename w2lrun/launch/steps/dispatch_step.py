"""
分发步骤

以 run 子命令调用 window2linux，其退出码即本进程退出码。
"""

from ...utils.logging import launch_logger
from ..launch_context import LaunchContext
from .launch_step import LaunchStep


class DispatchStep(LaunchStep):
    """调用 window2linux run"""

    def __init__(self):
        super().__init__("dispatch", "启动目标程序")

    def execute(self, context: LaunchContext) -> None:
        context.run_args = context.config.run_arguments(context.target_argument)
        launch_logger.info("Launching Window2Linux binary...")
        launch_logger.debug(" ".join(context.binary.command(context.run_args)))
        context.finish(context.binary.run(context.run_args))
