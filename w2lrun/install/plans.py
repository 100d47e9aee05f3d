"""
各包管理器家族的安装计划

每个计划分三组：必需依赖、可选 gamescope、Steam 客户端（仅在未检测到
Proton 时安装，按顺序尝试直到某个候选成功）。
"""

from dataclasses import dataclass, field
from typing import Dict, List

from ..host.package_manager import PackageManager

Command = List[str]


@dataclass(frozen=True)
class InstallPlan:
    """安装计划"""
    manager: PackageManager
    mandatory: List[Command]
    compositor: List[Command]
    distribution_client: List[Command] = field(default_factory=list)


def _apt() -> InstallPlan:
    install = ["apt-get", "install", "-y"]
    return InstallPlan(
        manager=PackageManager.APT,
        mandatory=[
            ["apt-get", "update"],
            install + ["wine", "winetricks", "cabextract", "p7zip-full", "ca-certificates", "curl"],
        ],
        compositor=[install + ["gamescope"]],
        distribution_client=[install + ["steam-installer"], install + ["steam"]],
    )


def _dnf() -> InstallPlan:
    install = ["dnf", "install", "-y"]
    return InstallPlan(
        manager=PackageManager.DNF,
        mandatory=[install + ["wine", "winetricks", "cabextract", "p7zip", "p7zip-plugins", "curl"]],
        compositor=[install + ["gamescope"]],
        distribution_client=[install + ["steam"]],
    )


def _pacman() -> InstallPlan:
    install = ["pacman", "-Sy", "--needed", "--noconfirm"]
    return InstallPlan(
        manager=PackageManager.PACMAN,
        mandatory=[install + ["wine", "winetricks", "cabextract", "p7zip", "curl"]],
        compositor=[install + ["gamescope"]],
        distribution_client=[install + ["steam"]],
    )


def _zypper() -> InstallPlan:
    install = ["zypper", "--non-interactive", "install"]
    return InstallPlan(
        manager=PackageManager.ZYPPER,
        mandatory=[install + ["wine", "winetricks", "cabextract", "p7zip", "curl"]],
        compositor=[install + ["gamescope"]],
        distribution_client=[install + ["steam"]],
    )


INSTALL_PLANS: Dict[PackageManager, InstallPlan] = {
    PackageManager.APT: _apt(),
    PackageManager.DNF: _dnf(),
    PackageManager.PACMAN: _pacman(),
    PackageManager.ZYPPER: _zypper(),
}


def get_install_plan(manager: PackageManager) -> InstallPlan:
    """获取安装计划

    Raises:
        KeyError: 不支持的包管理器
    """
    return INSTALL_PLANS[manager]
