"""
选项模型
使用 Pydantic v2 对组合子与校验函数的参数做类型检查
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..config.defaults import (
    DEBOUNCE_DEFAULT_LEADING,
    DEBOUNCE_DEFAULT_TRAILING,
    PASSWORD_DEFAULT_MIN_LENGTH,
    THROTTLE_DEFAULT_LEADING,
    THROTTLE_DEFAULT_TRAILING,
)


class BaseConfig(BaseModel):
    """基础配置类 - 所有选项模型的基类"""

    model_config = ConfigDict(
        frozen=True,  # 不可变
        extra='forbid',  # 禁止额外字段
        validate_assignment=True,  # 赋值时验证
        use_enum_values=True,  # 使用枚举值
    )


class DebounceOptions(BaseConfig):
    """防抖选项"""

    wait_ms: float = Field(ge=0, description="静默期（毫秒）")
    leading: bool = Field(default=DEBOUNCE_DEFAULT_LEADING, description="是否在前沿调用")
    trailing: bool = Field(default=DEBOUNCE_DEFAULT_TRAILING, description="是否在后沿调用")
    max_wait_ms: Optional[float] = Field(default=None, ge=0, description="最长等待时间（毫秒）")

    @property
    def first_delay_ms(self) -> float:
        """新一轮调用的首个定时器延迟"""
        if self.max_wait_ms is None:
            return self.wait_ms
        return min(self.wait_ms, self.max_wait_ms)


class ThrottleOptions(BaseConfig):
    """节流选项（前沿默认开启，与防抖不同）"""

    wait_ms: float = Field(ge=0, description="节流间隔（毫秒）")
    leading: bool = Field(default=THROTTLE_DEFAULT_LEADING)
    trailing: bool = Field(default=THROTTLE_DEFAULT_TRAILING)

    def to_debounce(self) -> DebounceOptions:
        """转换为 max_wait 等于间隔的防抖选项"""
        return DebounceOptions(
            wait_ms=self.wait_ms,
            leading=self.leading,
            trailing=self.trailing,
            max_wait_ms=self.wait_ms,
        )


class PasswordStrengthOptions(BaseConfig):
    """密码强度校验选项"""

    min_length: int = Field(default=PASSWORD_DEFAULT_MIN_LENGTH, ge=0)
    require_lowercase: bool = True
    require_uppercase: bool = True
    require_numbers: bool = True
    require_symbols: bool = True


__all__ = [
    "BaseConfig",
    "DebounceOptions",
    "ThrottleOptions",
    "PasswordStrengthOptions",
]
