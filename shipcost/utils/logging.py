"""日志配置模块

提供统一的日志配置，支持：
- 控制台输出
- 文件持久化
- 日志轮转（按大小或时间）
"""

import logging
import sys
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from shipcost.config.base import LoggingConfig

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    log_dir: Optional[Union[str, Path]] = None,
    log_file: str = "shipcost.log",
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    rotation: str = "size",  # "size" or "time"
    console: bool = True,
    format_string: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.Logger:
    """
    配置全局日志

    控制台日志写到 stderr，stdout 留给命令行的报价输出。

    Args:
        level: 日志级别
        log_dir: 日志目录，None 则不写文件
        log_file: 日志文件名
        max_bytes: 单文件最大大小（按大小轮转时）
        backup_count: 保留的备份文件数
        rotation: 轮转方式 "size" 或 "time"
        console: 是否输出到控制台
        format_string: 日志格式
        date_format: 日期格式

    Returns:
        root logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # 清除已有的 handler
    root_logger.handlers.clear()

    formatter = logging.Formatter(format_string, date_format)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        log_file_path = log_path / log_file

        if rotation == "time":
            file_handler = TimedRotatingFileHandler(
                log_file_path,
                when="midnight",
                interval=1,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.suffix = "%Y-%m-%d"
        else:
            file_handler = RotatingFileHandler(
                log_file_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )

        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger


def setup_logging_from_config(
    config: LoggingConfig, level: Optional[int] = None
) -> logging.Logger:
    """
    按 LoggingConfig 配置全局日志

    Args:
        config: 日志配置
        level: 覆盖配置中的日志级别
    """
    return setup_logging(
        level=level if level is not None else getattr(logging, config.level.value),
        log_dir=config.log_dir,
        log_file=config.log_file,
        max_bytes=config.max_bytes,
        backup_count=config.backup_count,
        rotation=config.rotation,
        console=config.console,
    )


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    获取指定名称的 logger

    Args:
        name: logger 名称，通常使用 __name__
        level: 可选的日志级别，覆盖全局设置

    Returns:
        Logger 实例
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
