"""ShipCost CLI 模块

提供统一的命令行接口：
- 运费报价与比较命令
- 系统管理命令
"""

from shipcost.cli.app import app, main

__all__ = ["app", "main"]
