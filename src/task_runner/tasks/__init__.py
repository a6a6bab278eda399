"""Ready-made Task implementations."""

from .function_task import FunctionTask

__all__ = ["FunctionTask"]
