"""
启动管道单元测试

使用假执行器测试启动管道、各启动步骤与上下文。
"""

from pathlib import Path

import pytest

from w2lrun.config.schema import RunConfig
from w2lrun.host.runner import CommandRunner
from w2lrun.install.result import InstallStatus
from w2lrun.launch.launch_context import (
    BinaryNotFoundError,
    LaunchContext,
    LaunchError,
    TargetResolutionError,
)
from w2lrun.launch.pipeline import LaunchPipeline
from w2lrun.launch.resolver import NO_TARGET_MESSAGE
from w2lrun.launch.steps import LaunchStep


class FakeRunner(CommandRunner):
    """记录调用；run 子命令返回指定退出码"""

    def __init__(self, run_exit: int = 0, probe_exit: int = 0, install_exit: int = 0):
        super().__init__()
        self.run_exit = run_exit
        self.probe_exit = probe_exit
        self.install_exit = install_exit

    def run(self, argv, quiet=False):
        argv = [str(arg) for arg in argv]
        self.history.append(argv)
        if argv[1:2] == ["run"]:
            return self.run_exit
        if argv[1:2] == ["inspect"]:
            return self.probe_exit
        return self.install_exit

    def binary_calls(self, binary: Path):
        return [argv[1:] for argv in self.history if argv[0] == str(binary)]


class MockLaunchStep(LaunchStep):
    """模拟启动步骤"""

    def __init__(self, name="MockStep", exc=None):
        super().__init__(name, "Mock step")
        self.exc = exc
        self.execute_called = False

    def execute(self, context):
        self.execute_called = True
        if self.exc:
            raise self.exc


@pytest.fixture
def binary(tmp_path):
    path = tmp_path / "bin" / "window2linux"
    path.parent.mkdir()
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(0o755)
    return path


@pytest.fixture
def prefix(tmp_path):
    return tmp_path / "prefix"


def which_from(*available):
    return lambda name: f"/usr/bin/{name}" if name in available else None


def make_config(binary, prefix, **overrides):
    values = {"binary": binary, "wine_prefix": prefix, "skip_install": True}
    values.update(overrides)
    return RunConfig(**values)


def execute(config, runner, which=None, euid=0):
    return LaunchPipeline().execute(config, runner=runner, which=which or which_from(), euid=euid)


class TestLaunchContext:
    """LaunchContext 测试"""

    def test_init(self, binary, prefix):
        """测试初始化"""
        config = make_config(binary, prefix)
        context = LaunchContext(config=config, runner=FakeRunner())

        assert context.binary.path == binary
        assert context.exit_code == 0
        assert not context.finished
        assert context.install_result is None

    def test_finish(self, binary, prefix):
        """测试结束流程"""
        context = LaunchContext(config=make_config(binary, prefix), runner=FakeRunner())
        context.finish(7)

        assert context.finished
        assert context.exit_code == 7


class TestLaunchPipelineSteps:
    """LaunchPipeline 步骤管理测试"""

    def test_default_steps(self):
        """测试默认步骤顺序"""
        names = [step.name for step in LaunchPipeline().get_steps()]
        assert names == ["binary", "install", "status", "setup-only", "resolve", "verify", "dispatch"]

    def test_add_and_remove_step(self):
        """测试添加与移除步骤"""
        pipeline = LaunchPipeline()
        initial = len(pipeline.get_steps())

        pipeline.add_step(MockLaunchStep("extra"), position=0)
        assert pipeline.get_steps()[0].name == "extra"

        pipeline.remove_step("extra")
        assert len(pipeline.get_steps()) == initial

    def test_get_steps_returns_copy(self):
        """测试 get_steps 返回副本"""
        pipeline = LaunchPipeline()
        assert pipeline.get_steps() is not pipeline.get_steps()

    def test_unexpected_exception_wrapped(self, binary, prefix):
        """测试非预期异常被包装为 LaunchError"""
        pipeline = LaunchPipeline()
        pipeline.add_step(MockLaunchStep("boom", exc=RuntimeError("disk on fire")), position=0)

        with pytest.raises(LaunchError, match="boom failed: disk on fire"):
            pipeline.execute(make_config(binary, prefix), runner=FakeRunner())

    def test_steps_after_finish_not_run(self, binary, prefix):
        """测试结束后不再执行后续步骤"""
        pipeline = LaunchPipeline()
        trailing = MockLaunchStep("trailing")
        pipeline.add_step(trailing)

        execute_config = make_config(binary, prefix, setup_only=True)
        pipeline.execute(execute_config, runner=FakeRunner(), which=which_from())

        assert not trailing.execute_called


class TestLaunchPipeline:
    """LaunchPipeline 执行测试"""

    def test_dispatch_arguments(self, binary, prefix, tmp_path):
        """测试分发参数与退出码"""
        target = tmp_path / "app.exe"
        target.write_bytes(b"MZ")
        runner = FakeRunner(run_exit=0)

        config = make_config(binary, prefix, target=target, mode="play", max_attempts="5")
        context = execute(config, runner)

        assert context.exit_code == 0
        assert runner.binary_calls(binary) == [
            ["inspect", "runners", "--json"],
            ["run", str(target), "--execute", "--mode", "play", "--max-attempts", "5", "--timeout-seconds", "180"],
        ]
        assert context.run_args == runner.binary_calls(binary)[-1]

    def test_gamescope_arguments(self, binary, prefix, tmp_path):
        """测试 gamescope 参数"""
        target = tmp_path / "game.exe"
        target.write_bytes(b"MZ")
        runner = FakeRunner()

        config = make_config(binary, prefix, target=target, use_gamescope=True)
        execute(config, runner, which=which_from("gamescope"))

        assert runner.binary_calls(binary)[-1][-5:] == [
            "--use-gamescope", "--gamescope-res", "1920x1080", "--gamescope-fps", "144",
        ]

    def test_exit_code_propagated(self, binary, prefix, tmp_path):
        """测试外部二进制退出码透传"""
        target = tmp_path / "app.exe"
        target.write_bytes(b"MZ")

        context = execute(make_config(binary, prefix, target=target), FakeRunner(run_exit=42))

        assert context.exit_code == 42

    def test_setup_only_skips_dispatch(self, binary, prefix):
        """测试仅准备模式：执行状态探测但不执行 run"""
        runner = FakeRunner()
        context = execute(make_config(binary, prefix, setup_only=True), runner)

        assert context.finished
        assert context.exit_code == 0
        assert runner.binary_calls(binary) == [["inspect", "runners", "--json"]]

    def test_no_install_runs_no_package_manager(self, binary, prefix):
        """测试 --no-install 时不调用包管理器"""
        runner = FakeRunner()
        context = execute(
            make_config(binary, prefix, setup_only=True),
            runner,
            which=which_from("apt-get", "gamescope"),
        )

        assert context.install_result.status == InstallStatus.SKIPPED
        assert all(argv[0] == str(binary) for argv in runner.history)

    def test_install_runs_when_enabled(self, binary, prefix):
        """测试启用安装时调用包管理器"""
        runner = FakeRunner()
        context = execute(
            make_config(binary, prefix, setup_only=True, skip_install=False),
            runner,
            which=which_from("pacman", "proton"),
        )

        assert context.install_result.status == InstallStatus.SUCCESS
        assert runner.history[0][0] == "pacman"

    def test_install_failure_not_fatal(self, binary, prefix):
        """测试安装失败后继续执行"""
        runner = FakeRunner(install_exit=1)
        context = execute(
            make_config(binary, prefix, setup_only=True, skip_install=False),
            runner,
            which=which_from("dnf", "proton"),
        )

        assert context.install_result.status == InstallStatus.FAILED
        assert context.exit_code == 0
        assert ["inspect", "runners", "--json"] in runner.binary_calls(binary)

    def test_privilege_error_fatal(self, binary, prefix):
        """测试无法提权为致命错误"""
        runner = FakeRunner(install_exit=1)

        with pytest.raises(LaunchError, match="Root privileges are required"):
            execute(
                make_config(binary, prefix, setup_only=True, skip_install=False),
                runner,
                which=which_from("apt-get"),
                euid=1000,
            )
        assert runner.binary_calls(binary) == []

    def test_probe_failure_tolerated(self, binary, prefix, capsys):
        """测试状态探测失败只警告"""
        context = execute(make_config(binary, prefix, setup_only=True), FakeRunner(probe_exit=3))

        assert context.exit_code == 0
        assert "Runner status probe failed (exit 3)." in capsys.readouterr().err

    def test_gamescope_status(self, binary, prefix, capsys):
        """测试 gamescope 状态输出"""
        execute(make_config(binary, prefix, setup_only=True), FakeRunner(), which=which_from("gamescope"))
        assert "gamescope available: /usr/bin/gamescope" in capsys.readouterr().out

        execute(make_config(binary, prefix, setup_only=True), FakeRunner())
        assert "gamescope not found on PATH." in capsys.readouterr().err

    def test_missing_binary(self, tmp_path, prefix):
        """测试二进制不存在"""
        runner = FakeRunner()
        missing = tmp_path / "window2linux"

        with pytest.raises(BinaryNotFoundError, match="Binary not found or not executable"):
            execute(make_config(missing, prefix, skip_install=False), runner, which=which_from("apt-get"))
        assert runner.history == []

    def test_non_executable_binary(self, tmp_path, prefix):
        """测试二进制不可执行"""
        path = tmp_path / "window2linux"
        path.write_text("data")
        path.chmod(0o644)

        with pytest.raises(BinaryNotFoundError):
            execute(make_config(path, prefix), FakeRunner())

    def test_auto_detection_failure(self, binary, prefix):
        """测试自动探测失败"""
        runner = FakeRunner()

        with pytest.raises(TargetResolutionError) as exc_info:
            execute(make_config(binary, prefix), runner)
        assert str(exc_info.value) == NO_TARGET_MESSAGE
        assert ["inspect", "runners", "--json"] in runner.binary_calls(binary)
        assert not any(call[0] == "run" for call in runner.binary_calls(binary))

    def test_auto_detected_target_dispatched(self, binary, prefix):
        """测试自动探测到的目标被分发"""
        found = prefix / "drive_c/Program Files/Microsoft Office/root/Office16/POWERPNT.EXE"
        found.parent.mkdir(parents=True)
        found.write_bytes(b"MZ")
        runner = FakeRunner()

        context = execute(make_config(binary, prefix), runner)

        assert context.target == found
        assert runner.binary_calls(binary)[-1][:2] == ["run", str(found)]

    def test_explicit_missing_target_not_replaced(self, binary, prefix, tmp_path):
        """测试显式目标不存在时报错，即使自动探测可以找到"""
        found = prefix / "drive_c/Program Files/Microsoft Office/root/Office16/POWERPNT.EXE"
        found.parent.mkdir(parents=True)
        found.write_bytes(b"MZ")
        missing = tmp_path / "missing.exe"

        with pytest.raises(TargetResolutionError, match="Target does not exist"):
            execute(make_config(binary, prefix, target=missing), FakeRunner())

    def test_directory_target_rejected(self, binary, prefix, tmp_path):
        """测试目标为目录时报错"""
        with pytest.raises(TargetResolutionError, match="Target does not exist"):
            execute(make_config(binary, prefix, target=tmp_path), FakeRunner())
