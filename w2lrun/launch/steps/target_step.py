"""
目标解析与校验步骤
"""

from ...utils.logging import debug, LogStage
from ..launch_context import LaunchContext, TargetResolutionError
from ..resolver import NO_TARGET_MESSAGE, TargetResolver
from .launch_step import LaunchStep


class TargetResolveStep(LaunchStep):
    """确定目标路径（显式参数或自动探测）"""

    def __init__(self):
        super().__init__("resolve", "解析目标程序")

    def execute(self, context: LaunchContext) -> None:
        resolver = TargetResolver(context.config.wine_prefix)
        target = resolver.resolve(context.config.target)
        if target is None:
            raise TargetResolutionError(NO_TARGET_MESSAGE)
        context.target = target


class TargetVerifyStep(LaunchStep):
    """目标必须是已存在的普通文件"""

    def __init__(self):
        super().__init__("verify", "校验目标文件")

    def execute(self, context: LaunchContext) -> None:
        if context.target is None or not context.target.is_file():
            raise TargetResolutionError(f"Target does not exist: {context.target_argument}")
        debug(f"Target: {context.target}", stage=LogStage.RESOLVE)
