"""
配置加载器

合并三层配置来源并构造 RunConfig：
内置默认值 < YAML 默认值文件 < 命令行参数。
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..utils.paths import default_binary_path, default_wine_prefix, expand_path
from .schema import RunConfig, flag_name


class ConfigError(Exception):
    """配置错误基类"""
    pass


class ConfigValidationError(ConfigError):
    """配置验证错误"""

    def __init__(self, message: str, errors: List[Dict[str, Any]]):
        super().__init__(message)
        self.errors = errors

    def format_errors(self) -> str:
        """格式化为单行可读信息"""
        messages = [_error_message(error) for error in self.errors]
        return "; ".join(messages) if messages else str(self)


def _error_message(error: Dict[str, Any]) -> str:
    # 自定义验证器的消息已包含参数名，直接使用原始异常文本
    ctx = error.get("ctx") or {}
    if isinstance(ctx.get("error"), ValueError):
        return str(ctx["error"])

    loc = error.get("loc") or ()
    msg = error.get("msg", "invalid value")
    if loc:
        return f"{flag_name(str(loc[0]))}: {msg}"
    return msg


# 默认值文件中允许的键（连字符与下划线等价）
FILE_KEYS = {
    "mode",
    "max_attempts",
    "timeout_seconds",
    "use_gamescope",
    "gamescope_res",
    "gamescope_fps",
    "setup_only",
    "skip_install",
    "binary",
    "wine_prefix",
}

KEY_ALIASES = {
    "no_install": "skip_install",
}

PATH_KEYS = ("binary", "wine_prefix")


class ConfigLoader:
    """配置加载器"""

    def __init__(self):
        self.yaml = YAML(typ="safe")

    def load_defaults_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """从 YAML 文件加载默认值

        Args:
            config_path: 配置文件路径

        Returns:
            Dict: 规范化后的键值（相对路径按配置文件目录解析）

        Raises:
            ConfigError: 文件不存在、格式错误或包含未知键
        """
        config_path = expand_path(config_path)

        if not config_path.exists():
            raise ConfigError(f"Config file does not exist: {config_path}")
        if not config_path.is_file():
            raise ConfigError(f"Config path is not a file: {config_path}")
        if config_path.suffix.lower() not in [".yaml", ".yml"]:
            raise ConfigError(f"Config file must be .yaml or .yml: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                raw_data = self.yaml.load(f)
        except YAMLError as e:
            raise ConfigError(f"YAML parse error in {config_path}: {e}")
        except OSError as e:
            raise ConfigError(f"Cannot read config file {config_path}: {e}")

        if raw_data is None:
            return {}
        if not isinstance(raw_data, dict):
            raise ConfigError(f"Config file root must be a mapping: {config_path}")

        data = self._normalize_keys(raw_data)
        self._resolve_relative_paths(data, config_path.parent)
        return data

    def build(
        self,
        cli_values: Mapping[str, Any],
        file_values: Optional[Mapping[str, Any]] = None,
    ) -> RunConfig:
        """合并配置来源并验证

        Args:
            cli_values: 命令行值，None 表示未指定
            file_values: 默认值文件中的值

        Raises:
            ConfigValidationError: 任一字段验证失败
        """
        merged: Dict[str, Any] = dict(file_values or {})
        for key, value in cli_values.items():
            if value is not None:
                merged[key] = value

        if merged.get("binary") in (None, ""):
            merged["binary"] = default_binary_path()
        if merged.get("wine_prefix") in (None, ""):
            merged["wine_prefix"] = default_wine_prefix()

        try:
            return RunConfig.model_validate(merged)
        except ValidationError as e:
            raise ConfigValidationError("Invalid configuration", e.errors())

    def _normalize_keys(self, raw_data: Dict[str, Any]) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for raw_key, value in raw_data.items():
            key = str(raw_key).replace("-", "_")
            key = KEY_ALIASES.get(key, key)
            if key not in FILE_KEYS:
                raise ConfigError(f"Unknown key in config file: {raw_key}")
            data[key] = value
        return data

    def _resolve_relative_paths(self, data: Dict[str, Any], base_path: Path) -> None:
        """路径字段相对配置文件所在目录解析"""
        for key in PATH_KEYS:
            value = data.get(key)
            if isinstance(value, str) and value:
                path = expand_path(value)
                if not path.is_absolute():
                    path = base_path / path
                data[key] = str(path)


# 全局加载器实例
config_loader = ConfigLoader()


def load_defaults_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """便捷函数：加载 YAML 默认值文件"""
    return config_loader.load_defaults_file(config_path)


def build_run_config(
    cli_values: Mapping[str, Any],
    file_values: Optional[Mapping[str, Any]] = None,
) -> RunConfig:
    """便捷函数：构造 RunConfig"""
    return config_loader.build(cli_values, file_values)
