"""
w2lrun - window2linux 启动器

A launcher that prepares Linux hosts for window2linux and runs Windows applications with it.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .config import RunConfig
from .launch import LaunchPipeline

__all__ = ["RunConfig", "LaunchPipeline", "__version__"]
