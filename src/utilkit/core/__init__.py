"""
核心模块初始化
导出主要的类型和选项模型
"""

from .types import (
    DateInput, KeySelector, KeyGenerator,
    PadSide, CaseStyle, ValidationKind,
    TimerHandle, Scheduler,
)

from .models import (
    BaseConfig, DebounceOptions, ThrottleOptions, PasswordStrengthOptions,
)

__all__ = [
    # 类型
    'DateInput', 'KeySelector', 'KeyGenerator',
    'PadSide', 'CaseStyle', 'ValidationKind',
    'TimerHandle', 'Scheduler',

    # 模型
    'BaseConfig', 'DebounceOptions', 'ThrottleOptions', 'PasswordStrengthOptions',
]
