"""
启动步骤基类模块
"""

from abc import ABC, abstractmethod

from ..launch_context import LaunchContext


class LaunchStep(ABC):
    """启动步骤抽象基类"""

    def __init__(self, name: str, description: str):
        self.name = name
        self.description = description

    @abstractmethod
    def execute(self, context: LaunchContext) -> None:
        """执行步骤；致命错误以 LaunchError 抛出"""
        pass
