"""
w2lrun CLI 主入口

单命令 CLI：w2lrun [options] [TARGET]。
参数错误（未知选项、缺少取值、多余的位置参数）统一以退出码 1 结束。
"""

import sys
from typing import List, Optional

import click
import typer

from .commands import run


# 创建主应用
app = typer.Typer(
    name="w2lrun",
    help="通过 window2linux 在 Linux 上运行 Windows 程序",
    rich_markup_mode="rich",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("run", context_settings={"help_option_names": ["-h", "--help"]})(run.run_command)


def main(argv: Optional[List[str]] = None) -> int:
    """控制台脚本入口，返回进程退出码"""
    try:
        result = app(args=argv, prog_name="w2lrun", standalone_mode=False)
    except click.ClickException as e:
        e.show()
        return 1
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 130

    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    sys.exit(main())
