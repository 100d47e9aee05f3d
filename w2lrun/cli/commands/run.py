"""
Run 命令实现

解析参数 -> 验证 -> 安装依赖（尽力而为）-> 输出状态 -> 解析目标 -> 调用 window2linux。

示例:
    w2lrun --setup-only
    w2lrun "$HOME/.wine/drive_c/Program Files/Microsoft Office/root/Office16/POWERPNT.EXE"
    w2lrun setup.exe --mode install --max-attempts 5
"""

from typing import Any, Dict, Optional

import typer
from rich.console import Console

from ... import __version__
from ...config import ConfigError, ConfigValidationError, build_run_config, load_defaults_file
from ...launch import LaunchError, LaunchPipeline
from ...utils.logging import OutputLevel, LogStage, configure_logging, error


console = Console()


def version_callback(value: Optional[bool]) -> None:
    """显示版本信息"""
    if value:
        console.print(f"w2lrun v{__version__}")
        raise typer.Exit()


def _flag(value: bool) -> Optional[bool]:
    # 未出现的开关不覆盖默认值文件中的设置
    return True if value else None


def run_command(
    target: Optional[str] = typer.Argument(
        None, metavar="TARGET", show_default=False,
        help="目标 .exe/.msi 路径；省略时自动探测 PowerPoint",
    ),
    setup_only: bool = typer.Option(False, "--setup-only", help="只安装/检查依赖，不启动程序"),
    no_install: bool = typer.Option(False, "--no-install", help="跳过依赖安装"),
    binary: Optional[str] = typer.Option(
        None, "--binary", metavar="PATH", envvar="W2L_BIN", show_default=False,
        help="window2linux 二进制路径（默认：启动器同目录下的 window2linux）",
    ),
    mode: Optional[str] = typer.Option(
        None, "--mode", metavar="MODE", show_default=False,
        help="执行模式：auto、install 或 play（默认 auto）",
    ),
    max_attempts: Optional[str] = typer.Option(
        None, "--max-attempts", metavar="N", show_default=False,
        help="每次运行的尝试次数（默认 3）",
    ),
    timeout_seconds: Optional[str] = typer.Option(
        None, "--timeout-seconds", metavar="N", show_default=False,
        help="每次尝试的超时秒数（默认 180）",
    ),
    use_gamescope: bool = typer.Option(False, "--use-gamescope", help="启用 gamescope 包装"),
    gamescope_res: Optional[str] = typer.Option(
        None, "--gamescope-res", metavar="WxH", show_default=False,
        help="gamescope 分辨率（默认 1920x1080）",
    ),
    gamescope_fps: Optional[str] = typer.Option(
        None, "--gamescope-fps", metavar="N", show_default=False,
        help="gamescope 刷新率（默认 144）",
    ),
    config: Optional[str] = typer.Option(
        None, "--config", metavar="PATH", envvar="W2L_CONFIG", show_default=False,
        help="YAML 默认值文件，命令行参数优先",
    ),
    log_file: Optional[str] = typer.Option(None, "--log-file", metavar="PATH", help="日志输出文件"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="输出详细调试日志 (DEBUG 级别)"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="显示版本信息",
    ),
) -> None:
    """通过 window2linux 在 Linux 上运行 Windows 程序

    自动安装 wine/winetricks/gamescope 等依赖，检查运行器状态后启动目标程序。
    """
    # 在任何输出前初始化日志
    configure_logging(
        level=OutputLevel.DEBUG if verbose else OutputLevel.INFO,
        log_file=log_file,
    )

    cli_values: Dict[str, Any] = {
        "target": target,
        "setup_only": _flag(setup_only),
        "skip_install": _flag(no_install),
        "binary": binary,
        "mode": mode,
        "max_attempts": max_attempts,
        "timeout_seconds": timeout_seconds,
        "use_gamescope": _flag(use_gamescope),
        "gamescope_res": gamescope_res,
        "gamescope_fps": gamescope_fps,
    }

    try:
        file_values = load_defaults_file(config) if config else {}
        run_config = build_run_config(cli_values, file_values)
    except ConfigValidationError as e:
        error(e.format_errors(), stage=LogStage.PARSE)
        raise typer.Exit(1)
    except ConfigError as e:
        error(str(e), stage=LogStage.PARSE)
        raise typer.Exit(1)

    try:
        context = LaunchPipeline().execute(run_config)
    except LaunchError as e:
        error(str(e))
        raise typer.Exit(1)

    if context.exit_code != 0:
        raise typer.Exit(context.exit_code)
