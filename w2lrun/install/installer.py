"""
依赖安装器

按探测到的包管理器执行固定的安装计划。所有命令都会尝试执行：
必需依赖失败记为 FAILED，可选 gamescope 与 Steam 客户端失败只记录不影响状态。
无法提权时抛出 PrivilegeError。
"""

import shutil
from pathlib import Path
from typing import Callable, List, Optional

from ..host.package_manager import PackageManager, Which, detect_package_manager
from ..host.privilege import PrivilegeEscalator
from ..host.proton import have_proton
from ..host.runner import CommandRunner
from ..utils.logging import install_logger
from .plans import get_install_plan
from .result import CommandGroup, CommandOutcome, InstallResult, InstallStatus

MANUAL_INSTALL_HINT = "Unsupported package manager. Please install manually: wine, winetricks, and Steam/Proton."


class DependencyInstaller:
    """依赖安装器"""

    def __init__(
        self,
        runner: CommandRunner,
        escalator: Optional[PrivilegeEscalator] = None,
        which: Which = shutil.which,
        home: Optional[Path] = None,
        proton_detector: Optional[Callable[[], bool]] = None,
    ):
        self.runner = runner
        self.escalator = escalator or PrivilegeEscalator(runner)
        self.which = which
        self.proton_detector = proton_detector or (lambda: have_proton(home, which))

    def install(self) -> InstallResult:
        """执行安装

        Returns:
            InstallResult: SUCCESS / FAILED（必需依赖失败） / SKIPPED（不支持的包管理器）

        Raises:
            PrivilegeError: 需要 root 但无法无交互提权
        """
        manager = detect_package_manager(self.which)
        if manager == PackageManager.UNKNOWN:
            install_logger.warning(MANUAL_INSTALL_HINT)
            return InstallResult.skipped_because(MANUAL_INSTALL_HINT, manager)

        plan = get_install_plan(manager)
        install_logger.info(f"Using {manager.value} to install dependencies...")

        outcomes: List[CommandOutcome] = []

        for argv in plan.mandatory:
            outcome = self._run(CommandGroup.MANDATORY, argv)
            outcomes.append(outcome)
            if not outcome.ok:
                install_logger.warning(f"Command failed (exit {outcome.returncode}): {' '.join(argv)}")

        for argv in plan.compositor:
            outcome = self._run(CommandGroup.COMPOSITOR, argv)
            outcomes.append(outcome)
            if not outcome.ok:
                install_logger.warning("gamescope package install skipped.")

        if self.proton_detector():
            install_logger.debug("Proton runtime detected; Steam packages not needed.")
        else:
            install_logger.info("Proton not detected. Installing Steam packages to provide Proton runtime...")
            # 候选依次尝试，成功即停止；全部失败也不影响结果
            for argv in plan.distribution_client:
                outcome = self._run(CommandGroup.DISTRIBUTION_CLIENT, argv)
                outcomes.append(outcome)
                if outcome.ok:
                    break

        result = InstallResult(status=InstallStatus.SUCCESS, manager=manager, outcomes=outcomes)
        failed = result.failed_commands(CommandGroup.MANDATORY)
        if failed:
            result.status = InstallStatus.FAILED
            result.message = f"{len(failed)} mandatory install command(s) failed"
        else:
            result.message = "Dependencies installed"
        return result

    def _run(self, group: CommandGroup, argv: List[str]) -> CommandOutcome:
        returncode = self.runner.run(self.escalator.wrap(argv))
        return CommandOutcome(group=group, argv=list(argv), returncode=returncode)
