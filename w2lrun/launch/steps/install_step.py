"""
依赖安装步骤

安装失败不终止流程；只有无法提权是致命错误。
"""

from ...host.privilege import PrivilegeError, PrivilegeEscalator
from ...install.installer import DependencyInstaller
from ...install.result import InstallResult
from ...utils.logging import install_logger
from ..launch_context import LaunchContext, LaunchError
from .launch_step import LaunchStep


class DependencyInstallStep(LaunchStep):
    """安装兼容层依赖（尽力而为）"""

    def __init__(self):
        super().__init__("install", "安装依赖")

    def create_installer(self, context: LaunchContext) -> DependencyInstaller:
        escalator = PrivilegeEscalator(context.runner, euid=context.euid)
        return DependencyInstaller(
            context.runner,
            escalator=escalator,
            which=context.which,
            home=context.home,
        )

    def execute(self, context: LaunchContext) -> None:
        if context.config.skip_install:
            install_logger.warning("Skipping dependency installation (--no-install).")
            context.install_result = InstallResult.skipped_because("--no-install")
            return

        try:
            result = self.create_installer(context).install()
        except PrivilegeError as e:
            raise LaunchError(str(e)) from e

        context.install_result = result
        if result.failed:
            install_logger.warning(f"Dependency installation incomplete ({result.message}); continuing.")
        elif result.succeeded:
            install_logger.success("Dependency installation finished.")
