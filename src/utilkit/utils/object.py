"""
字典/对象工具函数
路径均为以点分隔的字符串，如 'a.b.c'
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, MutableMapping, Sequence, Sized
from typing import Any, Dict, Iterable, TypeVar

T = TypeVar('T')

_MISSING = object()


def deep_clone(value: T) -> T:
    """深拷贝"""
    return copy.deepcopy(value)


def is_empty(value: Any) -> bool:
    """判断是否为空：None、空字符串、空序列、空映射、空集合"""
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def _step(current: Any, key: str) -> Any:
    """沿路径前进一步，无法前进时返回 _MISSING"""
    if isinstance(current, Mapping):
        return current.get(key, _MISSING)
    if isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
        try:
            index = int(key)
        except ValueError:
            return _MISSING
        if not 0 <= index < len(current):
            return _MISSING
        return current[index]
    if isinstance(current, (str, bytes, int, float, bool)):
        return _MISSING
    return getattr(current, key, _MISSING)


def get(obj: Any, path: str, default: Any = None) -> Any:
    """获取嵌套属性值，路径不存在时返回 default（与 dict.get 一致，存在的 None 原样返回）"""
    if obj is None or not isinstance(path, str) or not path:
        return default

    current = obj
    for key in path.split('.'):
        if current is None:
            return default
        current = _step(current, key)
        if current is _MISSING:
            return default

    return current


def set_(obj: Any, path: str, value: Any) -> None:
    """设置嵌套属性值，缺失的中间层以 dict 补齐；obj 不是可变映射或路径为空时不做任何事"""
    if not isinstance(obj, MutableMapping) or not isinstance(path, str):
        return

    keys = [key for key in path.split('.') if key]
    if not keys:
        return

    current = obj
    for key in keys[:-1]:
        if not isinstance(current.get(key), MutableMapping):
            current[key] = {}
        current = current[key]

    current[keys[-1]] = value


def pick(obj: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """选择指定键"""
    return {key: obj[key] for key in keys if key in obj}


def omit(obj: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """排除指定键"""
    excluded = set(keys)
    return {key: value for key, value in obj.items() if key not in excluded}


# 深度合并字典
def deep_merge(dict1: Mapping[str, Any], dict2: Mapping[str, Any]) -> Dict[str, Any]:
    """深度合并两个字典，列表等非映射值直接覆盖"""
    result = dict(dict1)
    for key, value in dict2.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def merge(target: Mapping[str, Any], *sources: Mapping[str, Any]) -> Dict[str, Any]:
    """依次深度合并多个字典，不修改 target"""
    result = dict(target)
    for source in sources:
        result = deep_merge(result, source)
    return result
