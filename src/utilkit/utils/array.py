"""
序列工具函数
所有函数都返回新列表，不修改输入
"""

from __future__ import annotations

import itertools
import random
from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

from ..core.types import KeySelector

T = TypeVar('T')


def _selector(key: KeySelector) -> Callable[[Any], Any]:
    """把键名/属性名转换为取值函数"""
    if callable(key):
        return key

    def select(item: Any) -> Any:
        if isinstance(item, Mapping):
            return item.get(key)
        return getattr(item, key, None)

    return select


class _Seen:
    """成员集合：可哈希元素用 set，不可哈希元素（dict、list 等）按相等比较"""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._hashable: set = set()
        self._unhashable: List[Any] = []
        for item in items:
            self.add(item)

    def __contains__(self, item: Any) -> bool:
        try:
            return item in self._hashable
        except TypeError:
            return item in self._unhashable

    def add(self, item: Any) -> None:
        try:
            self._hashable.add(item)
        except TypeError:
            self._unhashable.append(item)


# 去重

def unique(items: Iterable[T]) -> List[T]:
    """去重，保持顺序；支持不可哈希元素"""
    seen = _Seen()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def unique_by(items: Iterable[T], key: KeySelector) -> List[T]:
    """按属性去重，保留第一次出现的元素"""
    select = _selector(key)
    seen = _Seen()
    result = []
    for item in items:
        k = select(item)
        if k not in seen:
            seen.add(k)
            result.append(item)
    return result


# 分块与扁平化

def chunk(items: Iterable[T], size: int) -> List[List[T]]:
    """将可迭代对象按 size 分块，size <= 0 时返回空列表"""
    if size <= 0:
        return []
    iterator = iter(items)
    result = []
    while True:
        batch = list(itertools.islice(iterator, size))
        if not batch:
            break
        result.append(batch)
    return result


def flatten(items: Sequence[Any], depth: int = 1) -> List[Any]:
    """按深度扁平化嵌套的 list/tuple"""
    if depth <= 0:
        return list(items)
    result: List[Any] = []
    for item in items:
        if isinstance(item, (list, tuple)):
            result.extend(flatten(item, depth - 1))
        else:
            result.append(item)
    return result


def flatten_deep(items: Sequence[Any]) -> List[Any]:
    """完全扁平化"""
    result: List[Any] = []
    for item in items:
        if isinstance(item, (list, tuple)):
            result.extend(flatten_deep(item))
        else:
            result.append(item)
    return result


# 集合运算（保持第一个序列的顺序）

def intersection(first: Iterable[T], second: Iterable[T]) -> List[T]:
    lookup = _Seen(second)
    return [item for item in first if item in lookup]


def difference(first: Iterable[T], second: Iterable[T]) -> List[T]:
    """first 中有而 second 中没有的元素"""
    lookup = _Seen(second)
    return [item for item in first if item not in lookup]


def union(first: Iterable[T], second: Iterable[T]) -> List[T]:
    return unique(itertools.chain(first, second))


# 随机

def shuffle(items: Iterable[T], rng: Optional[random.Random] = None) -> List[T]:
    """Fisher-Yates 洗牌，返回新列表"""
    result = list(items)
    rand = rng or random
    for i in range(len(result) - 1, 0, -1):
        j = rand.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def sample(items: Sequence[T], count: int = 1, rng: Optional[random.Random] = None) -> List[T]:
    """随机选取 count 个元素，count 不小于长度时返回整个洗牌结果"""
    shuffled = shuffle(items, rng)
    if count >= len(shuffled):
        return shuffled
    return shuffled[:max(count, 0)]


# 分组与求和

def group_by(items: Iterable[T], key: KeySelector) -> Dict[str, List[T]]:
    """按属性分组，分组键统一转为字符串"""
    select = _selector(key)
    result: Dict[str, List[T]] = {}
    for item in items:
        result.setdefault(str(select(item)), []).append(item)
    return result


def _is_numeric(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def sum_(numbers: Iterable[float]) -> float:
    """数值求和"""
    total = 0
    for number in numbers:
        total += number
    return total


def sum_by(items: Iterable[Any], key: KeySelector) -> float:
    """按属性求和，非数值按 0 计"""
    select = _selector(key)
    total = 0
    for item in items:
        value = select(item)
        if _is_numeric(value):
            total += value
    return total
