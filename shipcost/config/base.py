"""Pydantic 配置基类

使用 Pydantic 进行配置校验，支持：
- 类型自动转换
- 值范围校验
- 环境变量加载
- 配置文件加载 (YAML/JSON)
"""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# ============================================================
# 枚举类型
# ============================================================


class LogLevel(str, Enum):
    """日志级别"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# ============================================================
# 配置模型
# ============================================================


class ShippingConfig(BaseModel):
    """运费配置"""

    # 启用的承运商，顺序不影响注册顺序
    enabled_carriers: List[str] = Field(default=["UPS", "FedEx", "EMS"])
    default_carrier: str = Field(default="FedEx")

    # EMS 随机系数种子，None 表示不可复现
    ems_seed: Optional[int] = Field(default=None)

    # 命令行演示默认订单
    default_country: str = Field(default="Russia")
    default_cost: float = Field(default=1000.0, ge=0)

    @field_validator("enabled_carriers")
    @classmethod
    def validate_carriers(cls, v: List[str]) -> List[str]:
        if len(set(v)) != len(v):
            raise ValueError(f"承运商重复: {v}")
        return v

    @model_validator(mode="after")
    def validate_default_carrier(self) -> "ShippingConfig":
        if self.default_carrier not in self.enabled_carriers:
            raise ValueError(
                f"默认承运商 {self.default_carrier} 未启用, 已启用: {self.enabled_carriers}"
            )
        return self


class LoggingConfig(BaseModel):
    """日志配置"""

    level: LogLevel = Field(default=LogLevel.INFO)
    log_dir: Optional[Path] = Field(default=None)  # None 表示不写文件
    log_file: str = Field(default="shipcost.log")
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024)  # 10MB
    backup_count: int = Field(default=5, ge=0)
    rotation: str = Field(default="size")  # size, time
    console: bool = Field(default=True)

    @field_validator("rotation")
    @classmethod
    def validate_rotation(cls, v: str) -> str:
        if v not in {"size", "time"}:
            raise ValueError(f"不支持的轮转方式: {v}, 可选: size, time")
        return v


# ============================================================
# 主配置类
# ============================================================


class AppSettings(BaseSettings):
    """应用主配置

    支持从环境变量和 .env 文件加载
    """

    model_config = SettingsConfigDict(
        env_prefix="SHIPCOST_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # 子配置
    shipping: ShippingConfig = Field(default_factory=ShippingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """导出为字典"""
        return self.model_dump()

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "AppSettings":
        """从 YAML 文件加载"""
        import yaml

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "AppSettings":
        """从 JSON 文件加载"""
        import json

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        return cls(**data)

    def save_yaml(self, path: Union[str, Path]) -> None:
        """保存为 YAML 文件"""
        import yaml

        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, allow_unicode=True, default_flow_style=False)

    def save_json(self, path: Union[str, Path]) -> None:
        """保存为 JSON 文件"""
        import json

        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)


# ============================================================
# 全局配置实例
# ============================================================

_settings: Optional[AppSettings] = None


def get_settings() -> AppSettings:
    """获取全局配置实例"""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """重新加载配置"""
    global _settings
    _settings = AppSettings()
    return _settings
