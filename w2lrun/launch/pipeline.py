"""
启动管道模块

按固定顺序执行启动步骤：
检查二进制 -> 安装依赖 -> 输出状态 -> [仅准备时结束] -> 解析目标 -> 校验目标 -> 分发。
任一步骤抛出 LaunchError 即终止；安装失败不会抛出。
"""

import shutil
from pathlib import Path
from typing import List, Optional

from ..config.schema import RunConfig
from ..host.package_manager import Which
from ..host.runner import CommandRunner
from ..utils.logging import debug, LogStage
from .launch_context import LaunchContext, LaunchError
from .steps import (
    BinaryCheckStep,
    DependencyInstallStep,
    DispatchStep,
    LaunchStep,
    SetupOnlyGateStep,
    StatusStep,
    TargetResolveStep,
    TargetVerifyStep,
)


class LaunchPipeline:
    """启动管道，负责协调启动步骤的执行"""

    def __init__(self):
        self._steps: List[LaunchStep] = []
        self._init_default_steps()

    def _init_default_steps(self):
        self._steps = [
            BinaryCheckStep(),
            DependencyInstallStep(),
            StatusStep(),
            SetupOnlyGateStep(),
            TargetResolveStep(),
            TargetVerifyStep(),
            DispatchStep(),
        ]

    def add_step(self, step: LaunchStep, position: Optional[int] = None):
        """添加步骤"""
        if position is None:
            self._steps.append(step)
        else:
            self._steps.insert(position, step)

    def remove_step(self, step_name: str):
        """移除步骤"""
        self._steps = [step for step in self._steps if step.name != step_name]

    def get_steps(self) -> List[LaunchStep]:
        """获取所有步骤（副本）"""
        return self._steps.copy()

    def execute(
        self,
        config: RunConfig,
        runner: Optional[CommandRunner] = None,
        which: Which = shutil.which,
        home: Optional[Path] = None,
        euid: Optional[int] = None,
    ) -> LaunchContext:
        """执行启动管道

        Args:
            config: 已验证的运行配置
            runner: 外部命令执行器
            which: PATH 查找函数
            home: 用户主目录（Proton 探测用）
            euid: 有效用户 ID（提权判断用）

        Returns:
            LaunchContext: 上下文，exit_code 为最终退出码

        Raises:
            LaunchError: 任一致命错误
        """
        context = LaunchContext(
            config=config,
            runner=runner or CommandRunner(),
            which=which,
            home=home,
            euid=euid,
        )

        for step in self._steps:
            if context.finished:
                break
            debug(f"step: {step.description}", stage=LogStage.LAUNCH)
            try:
                step.execute(context)
            except LaunchError:
                raise
            except Exception as e:
                debug(f"Unexpected failure in step {step.name!r}: {e!r}", stage=LogStage.LAUNCH)
                raise LaunchError(f"{step.name} failed: {e}") from e

        return context
