"""
基础类型定义模块
提供函数组合子与工具函数共用的类型别名、枚举与调度协议
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Hashable, Protocol, TypeVar, Union, runtime_checkable

T = TypeVar('T')
U = TypeVar('U')

# 日期输入：datetime/date 对象、毫秒时间戳或日期字符串
DateInput = Union[datetime, date, int, float, str]

# 属性键：映射键/属性名，或取值函数
KeySelector = Union[str, Callable[[Any], Any]]

# 缓存键生成器
KeyGenerator = Callable[..., Hashable]


class PadSide(str, Enum):
    """字符串填充方向"""
    START = "start"
    END = "end"
    BOTH = "both"


class CaseStyle(str, Enum):
    """命名风格"""
    CAMEL = "camel"
    KEBAB = "kebab"
    SNAKE = "snake"
    PASCAL = "pascal"
    CAPITALIZE = "capitalize"


class ValidationKind(str, Enum):
    """可校验的输入类别"""
    EMAIL = "email"
    PHONE = "phone"
    ID_CARD = "id-card"
    URL = "url"
    IP = "ip"
    BANK_CARD = "bank-card"
    HEX_COLOR = "hex-color"
    QQ = "qq"
    WECHAT = "wechat"
    PLATE = "plate"
    DATE = "date"


@runtime_checkable
class TimerHandle(Protocol):
    """已调度定时器的句柄"""

    def cancel(self) -> None: ...


@runtime_checkable
class Scheduler(Protocol):
    """协作式调度器协议

    时间单位均为毫秒。防抖/节流只通过该协议访问时钟与定时器，
    默认实现基于当前运行的 asyncio 事件循环。
    """

    def now(self) -> float: ...

    def call_later(self, delay_ms: float, callback: Callable[[], Any]) -> TimerHandle: ...


__all__ = [
    "T", "U",
    "DateInput", "KeySelector", "KeyGenerator",
    "PadSide", "CaseStyle", "ValidationKind",
    "TimerHandle", "Scheduler",
]
