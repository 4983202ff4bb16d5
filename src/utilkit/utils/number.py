"""
数值工具函数
随机数、格式化、统计量与简单几何计算
"""

from __future__ import annotations

import math
import random
import re
from typing import Sequence, Union

from ..config.defaults import (
    FILE_SIZE_UNITS,
    NUMBER_DEFAULT_PRECISION,
    THOUSANDS_DEFAULT_SEPARATOR,
)

Number = Union[int, float]

_THOUSANDS_RE = re.compile(r'\B(?=(\d{3})+(?!\d))')


# 随机数

def random_int(low: int, high: int) -> int:
    """[low, high] 闭区间内的随机整数"""
    return random.randint(low, high)


def random_float(low: float, high: float, precision: int = NUMBER_DEFAULT_PRECISION) -> float:
    """随机浮点数，保留 precision 位小数"""
    value = round(random.uniform(low, high), precision)
    return float(min(max(value, low), high))


# 格式化

def format_number(num: Number, precision: int = NUMBER_DEFAULT_PRECISION) -> str:
    """固定小数位格式化"""
    return f"{num:.{precision}f}"


def format_thousands(num: Number, separator: str = THOUSANDS_DEFAULT_SEPARATOR) -> str:
    """千分位格式化，小数部分保持不变"""
    integer, dot, fraction = str(num).partition('.')
    return _THOUSANDS_RE.sub(separator, integer) + dot + fraction


def to_percent(num: Number, precision: int = NUMBER_DEFAULT_PRECISION) -> str:
    return f"{num * 100:.{precision}f}%"


def format_file_size(size: Number, precision: int = NUMBER_DEFAULT_PRECISION) -> str:
    """字节数转为可读文件大小，如 1.5 KB"""
    if size == 0:
        return f"0 {FILE_SIZE_UNITS[0]}"

    index = 0
    while abs(size) >= 1024 ** (index + 1) and index < len(FILE_SIZE_UNITS) - 1:
        index += 1
    value = f"{size / 1024 ** index:.{precision}f}"
    if '.' in value:
        value = value.rstrip('0').rstrip('.')
    return f"{value} {FILE_SIZE_UNITS[index]}"


# 基本判断

def clamp(num: Number, low: Number, high: Number) -> Number:
    """限制在 [low, high] 范围内"""
    return min(max(num, low), high)


def is_even(num: int) -> bool:
    return num % 2 == 0


def is_odd(num: int) -> bool:
    return num % 2 != 0


# 统计量，空序列均返回 0

def average(numbers: Sequence[Number]) -> float:
    if not numbers:
        return 0
    return sum(numbers) / len(numbers)


def variance(numbers: Sequence[Number]) -> float:
    """总体方差"""
    if not numbers:
        return 0
    avg = average(numbers)
    return sum((num - avg) ** 2 for num in numbers) / len(numbers)


def standard_deviation(numbers: Sequence[Number]) -> float:
    return math.sqrt(variance(numbers))


def median(numbers: Sequence[Number]) -> float:
    if not numbers:
        return 0
    ordered = sorted(numbers)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) / 2
    return ordered[mid]


# 几何与数论

def distance(x1: Number, y1: Number, x2: Number, y2: Number) -> float:
    """两点间欧氏距离"""
    return math.hypot(x2 - x1, y2 - y1)


def to_radians(degrees: Number) -> float:
    return math.radians(degrees)


def to_degrees(radians: Number) -> float:
    return math.degrees(radians)


def gcd(a: Number, b: Number) -> Number:
    """最大公约数（欧几里得算法，支持浮点数）"""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: Number, b: Number) -> Number:
    """最小公倍数，任一为 0 时返回 0"""
    divisor = gcd(a, b)
    if divisor == 0:
        return 0
    if isinstance(a, int) and isinstance(b, int):
        return abs(a * b) // divisor
    return abs(a * b) / divisor
