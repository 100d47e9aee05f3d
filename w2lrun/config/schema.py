"""
运行配置 Schema 定义

使用 Pydantic 定义不可变的运行配置，命令行解析后一次性验证，
随后显式传递给每个启动步骤。
"""

from __future__ import annotations

import os
import re
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ValidationInfo, field_validator


class ExecutionMode(str, Enum):
    """执行模式枚举（原样转发给 window2linux）"""
    AUTO = "auto"
    INSTALL = "install"
    PLAY = "play"


MODE_CHOICES = [mode.value for mode in ExecutionMode]

_INTEGER_PATTERN = re.compile(r"[0-9]+")

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_TIMEOUT_SECONDS = 180
DEFAULT_GAMESCOPE_RES = "1920x1080"
DEFAULT_GAMESCOPE_FPS = 144


def flag_name(field_name: str) -> str:
    """字段名对应的命令行参数名"""
    return "--" + field_name.replace("_", "-")


class RunConfig(BaseModel):
    """启动器运行配置

    创建后不可修改；所有字段在进入安装/启动流程前已经验证。
    """

    mode: ExecutionMode = Field(ExecutionMode.AUTO, description="执行模式")
    max_attempts: int = Field(DEFAULT_MAX_ATTEMPTS, description="每次运行的尝试次数")
    timeout_seconds: int = Field(DEFAULT_TIMEOUT_SECONDS, description="每次尝试的超时秒数")
    use_gamescope: bool = Field(False, description="是否启用 gamescope")
    gamescope_res: str = Field(DEFAULT_GAMESCOPE_RES, description="gamescope 分辨率 (WxH)")
    gamescope_fps: int = Field(DEFAULT_GAMESCOPE_FPS, description="gamescope 刷新率")
    setup_only: bool = Field(False, description="只安装/检查依赖，不启动程序")
    skip_install: bool = Field(False, description="跳过依赖安装")
    binary: Path = Field(..., description="window2linux 二进制路径")
    target: Optional[str] = Field(None, description="目标 .exe/.msi 路径（保留用户输入原文）")
    wine_prefix: Path = Field(..., description="Wine 前缀目录")

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }

    @field_validator("mode", mode="before")
    @classmethod
    def validate_mode(cls, v: Any) -> Any:
        """模式必须与可选值完全一致（区分大小写，不去除空白）"""
        if isinstance(v, ExecutionMode):
            return v
        if not isinstance(v, str) or v not in MODE_CHOICES:
            raise ValueError(f"--mode must be one of: {', '.join(MODE_CHOICES)}")
        return v

    @field_validator("max_attempts", "timeout_seconds", "gamescope_fps", mode="before")
    @classmethod
    def validate_integer(cls, v: Any, info: ValidationInfo) -> int:
        """数值参数必须是非负整数字面量"""
        message = f"{flag_name(info.field_name)} must be an integer"

        # bool 是 int 的子类，需单独排除
        if isinstance(v, bool):
            raise ValueError(message)
        if isinstance(v, int):
            if v < 0:
                raise ValueError(message)
            return v
        if isinstance(v, str) and _INTEGER_PATTERN.fullmatch(v):
            return int(v)
        raise ValueError(message)

    @field_validator("target", mode="before")
    @classmethod
    def validate_target(cls, v: Any) -> Any:
        """空字符串视为未提供目标；路径对象按原文保存"""
        if isinstance(v, os.PathLike):
            v = os.fspath(v)
        if v == "":
            return None
        return v

    def run_arguments(self, target: Union[str, Path]) -> List[str]:
        """构造传给 window2linux 的 run 参数列表"""
        args = [
            "run",
            str(target),
            "--execute",
            "--mode", self.mode.value,
            "--max-attempts", str(self.max_attempts),
            "--timeout-seconds", str(self.timeout_seconds),
        ]
        if self.use_gamescope:
            args.extend([
                "--use-gamescope",
                "--gamescope-res", self.gamescope_res,
                "--gamescope-fps", str(self.gamescope_fps),
            ])
        return args

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式（路径与枚举转为字符串）"""
        data = self.model_dump()
        for key, value in data.items():
            if isinstance(value, (Path, Enum)):
                data[key] = value.value if isinstance(value, Enum) else str(value)
        return data
