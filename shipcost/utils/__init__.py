"""工具模块"""

from .logging import get_logger, setup_logging, setup_logging_from_config

__all__ = ["get_logger", "setup_logging", "setup_logging_from_config"]
