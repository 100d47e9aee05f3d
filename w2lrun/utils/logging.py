"""
日志工具 - 统一输出门面

封装 Rich Console，所有输出都带时间戳；警告与错误写入 stderr，
可选追加写入日志文件。
"""

import sys
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

from rich.console import Console
from rich.markup import escape


class OutputLevel:
    """输出级别常量"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LogStage:
    """日志阶段标记"""
    PARSE = "PARSE"
    BINARY = "BINARY"
    INSTALL = "INSTALL"
    STATUS = "STATUS"
    RESOLVE = "RESOLVE"
    LAUNCH = "LAUNCH"
    DONE = "DONE"


_LEVEL_ORDER = {
    OutputLevel.DEBUG: 0,
    OutputLevel.INFO: 1,
    OutputLevel.SUCCESS: 1,
    OutputLevel.WARNING: 2,
    OutputLevel.ERROR: 3,
}

_LEVEL_STYLES = {
    OutputLevel.DEBUG: "dim",
    OutputLevel.INFO: "default",
    OutputLevel.SUCCESS: "green",
    OutputLevel.WARNING: "yellow",
    OutputLevel.ERROR: "red",
}


class OutputFacade:
    """输出门面

    统一封装所有输出操作。普通信息写 stdout，警告/错误写 stderr。
    Console 不绑定具体文件对象，始终跟随当前的 sys.stdout / sys.stderr。
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._stdout = Console(highlight=False, soft_wrap=True)
        self._stderr = Console(stderr=True, highlight=False, soft_wrap=True)
        self._file_handle = None  # type: Optional[Any]
        self._log_level = OutputLevel.INFO
        self._date_format = "%Y-%m-%d %H:%M:%S"
        self._time_format = "%H:%M:%S"

    @property
    def level(self) -> str:
        return self._log_level

    def _get_timestamp(self, include_date: bool = False) -> str:
        now = datetime.now()
        return now.strftime(self._date_format if include_date else self._time_format)

    def _should_output(self, level: str) -> bool:
        return _LEVEL_ORDER.get(level, 1) >= _LEVEL_ORDER.get(self._log_level, 1)

    def _format_plain(self, message: str, level: str, stage: Optional[str],
                      include_date: bool = False) -> str:
        timestamp = self._get_timestamp(include_date)
        if stage:
            return f"[{timestamp}] {level} [{stage}] {message}"
        return f"[{timestamp}] {level} {message}"

    def _emit(self, message: str, level: str, stage: Optional[str] = None) -> None:
        if not self._should_output(level):
            return

        with self._lock:
            console = self._stderr if level in (OutputLevel.WARNING, OutputLevel.ERROR) else self._stdout
            timestamp = self._get_timestamp()
            style = _LEVEL_STYLES.get(level, "default")

            # 消息中可能包含路径等含方括号的文本，需要转义 markup
            text = escape(message)
            if stage:
                formatted = f"[dim]\\[{timestamp}][/dim] [bold]{level}[/bold] [cyan]\\[{stage}][/cyan] {text}"
            else:
                formatted = f"[dim]\\[{timestamp}][/dim] [bold]{level}[/bold] {text}"

            console.print(formatted, style=style)
            self._write_to_file(message, level, stage)

    def _write_to_file(self, message: str, level: str, stage: Optional[str]) -> None:
        if not self._file_handle:
            return
        try:
            self._file_handle.write(self._format_plain(message, level, stage, include_date=True) + "\n")
            self._file_handle.flush()
        except OSError:
            pass  # 日志文件写入失败不影响主流程

    def set_level(self, level: str) -> None:
        """设置输出级别"""
        with self._lock:
            if level in _LEVEL_ORDER:
                self._log_level = level

    def set_log_file(self, file_path: Union[str, Path]) -> None:
        """设置日志文件（追加模式）"""
        with self._lock:
            self._close_file()
            try:
                log_path = Path(file_path).expanduser()
                log_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_handle = open(log_path, "a", encoding="utf-8")
            except OSError as e:
                self.warning(f"Cannot open log file {file_path}: {e}")

    def _close_file(self) -> None:
        if self._file_handle:
            try:
                self._file_handle.close()
            except OSError:
                pass
            self._file_handle = None

    def debug(self, message: str, stage: Optional[str] = None) -> None:
        self._emit(message, OutputLevel.DEBUG, stage)

    def info(self, message: str, stage: Optional[str] = None) -> None:
        self._emit(message, OutputLevel.INFO, stage)

    def success(self, message: str, stage: Optional[str] = None) -> None:
        self._emit(message, OutputLevel.SUCCESS, stage)

    def warning(self, message: str, stage: Optional[str] = None) -> None:
        self._emit(message, OutputLevel.WARNING, stage)

    def error(self, message: str, stage: Optional[str] = None) -> None:
        self._emit(message, OutputLevel.ERROR, stage)

    def close(self) -> None:
        with self._lock:
            self._close_file()


# 全局输出门面实例
_output_facade: Optional[OutputFacade] = None


def get_output_facade() -> OutputFacade:
    """获取全局输出门面实例"""
    global _output_facade
    if _output_facade is None:
        _output_facade = OutputFacade()
    return _output_facade


def debug(message: str, stage: Optional[str] = None) -> None:
    get_output_facade().debug(message, stage)


def info(message: str, stage: Optional[str] = None) -> None:
    get_output_facade().info(message, stage)


def success(message: str, stage: Optional[str] = None) -> None:
    get_output_facade().success(message, stage)


def warning(message: str, stage: Optional[str] = None) -> None:
    get_output_facade().warning(message, stage)


def error(message: str, stage: Optional[str] = None) -> None:
    get_output_facade().error(message, stage)


def set_log_level(level: str) -> None:
    get_output_facade().set_level(level)


def set_log_file(file_path: Union[str, Path]) -> None:
    get_output_facade().set_log_file(file_path)


def close_logger() -> None:
    """关闭日志系统"""
    global _output_facade
    if _output_facade:
        _output_facade.close()
        _output_facade = None


class StageLogger:
    """阶段日志器，固定 stage 标记"""

    def __init__(self, stage: str):
        self.stage = stage

    def debug(self, message: str) -> None:
        debug(message, self.stage)

    def info(self, message: str) -> None:
        info(message, self.stage)

    def success(self, message: str) -> None:
        success(message, self.stage)

    def warning(self, message: str) -> None:
        warning(message, self.stage)

    def error(self, message: str) -> None:
        error(message, self.stage)


def get_stage_logger(stage: str) -> StageLogger:
    return StageLogger(stage)


def configure_logging(level: str = OutputLevel.INFO, log_file: Optional[Union[str, Path]] = None) -> None:
    """配置日志系统"""
    set_log_level(level)
    if log_file:
        set_log_file(log_file)


install_logger = get_stage_logger(LogStage.INSTALL)
status_logger = get_stage_logger(LogStage.STATUS)
resolve_logger = get_stage_logger(LogStage.RESOLVE)
launch_logger = get_stage_logger(LogStage.LAUNCH)


import atexit
atexit.register(close_logger)
