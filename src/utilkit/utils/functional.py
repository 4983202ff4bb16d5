"""
函数式组合子
记忆化、只执行一次、柯里化、函数组合，以及基于 anyio 的延迟与重试
"""

from __future__ import annotations

import inspect
import json
from functools import update_wrapper, wraps
from typing import Any, Awaitable, Callable, Dict, Generic, Hashable, Optional, TypeVar, Union

import anyio

from ..config.defaults import RETRY_DEFAULT_DELAY_MS, RETRY_DEFAULT_TIMES
from ..core.types import KeyGenerator
from .logging import get_logger

T = TypeVar('T')
R = TypeVar('R')

logger = get_logger(__name__)


# 记忆化

def default_cache_key(*args: Any, **kwargs: Any) -> str:
    """按参数结构序列化得到缓存键

    结构相同（深度相等）的 JSON 可表示参数得到同一个键；
    其它类型的参数需要调用方提供 key_generator。
    """
    payload = [list(args), kwargs]
    try:
        return json.dumps(payload, sort_keys=True, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise TypeError(
            f"无法为参数生成默认缓存键，请提供 key_generator: {e}"
        ) from e


class Memoized(Generic[R]):
    """记忆化包装对象，cache 可直接查看"""

    def __init__(self, func: Callable[..., R], key_generator: Optional[KeyGenerator] = None) -> None:
        update_wrapper(self, func)
        self._func = func
        self._key_generator: KeyGenerator = key_generator or default_cache_key
        self.cache: Dict[Hashable, R] = {}

    def __call__(self, *args: Any, **kwargs: Any) -> R:
        key = self._key_generator(*args, **kwargs)
        if key in self.cache:
            return self.cache[key]
        result = self._func(*args, **kwargs)
        self.cache[key] = result
        return result

    def clear(self) -> None:
        self.cache.clear()


def memoize(func: Callable[..., R], key_generator: Optional[KeyGenerator] = None) -> Memoized[R]:
    """记忆化装饰器，无淘汰策略"""
    return Memoized(func, key_generator)


# 只执行一次

def once(func: Callable[..., R]) -> Callable[..., R]:
    """只在第一次调用时执行 func，之后始终返回第一次的结果"""
    called = False
    result: Any = None

    @wraps(func)
    def wrapper(*args, **kwargs):
        nonlocal called, result
        if not called:
            called = True
            result = func(*args, **kwargs)
        return result

    return wrapper


# 柯里化

def _infer_arity(func: Callable[..., Any]) -> int:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError) as e:
        raise TypeError(f"无法推断 {func!r} 的参数个数，请显式传入 arity") from e
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    count = 0
    for param in signature.parameters.values():
        if param.kind not in positional or param.default is not inspect.Parameter.empty:
            break
        count += 1
    return count


def curry(func: Callable[..., R], arity: Optional[int] = None) -> Callable[..., Any]:
    """柯里化：凑够 arity 个位置参数后才调用 func

    arity 默认取 func 必填位置参数的个数；多出的参数原样传入。
    每次部分应用都返回新的闭包，不同分支互不影响。
    """
    expected = _infer_arity(func) if arity is None else arity

    def accumulate(collected: tuple, collected_kwargs: Dict[str, Any]) -> Callable[..., Any]:
        @wraps(func)
        def curried(*args, **kwargs):
            all_args = collected + args
            all_kwargs = {**collected_kwargs, **kwargs}
            if len(all_args) >= expected:
                return func(*all_args, **all_kwargs)
            return accumulate(all_args, all_kwargs)

        return curried

    return accumulate((), {})


# 函数组合

def compose(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """函数组合：从右到左组合函数"""
    if not functions:
        raise ValueError("compose 至少需要一个函数")

    def composed(x):
        result = x
        for func in reversed(functions):
            result = func(result)
        return result

    return composed


def pipe(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """管道：从左到右依次应用函数"""
    if not functions:
        raise ValueError("pipe 至少需要一个函数")

    def piped(x):
        result = x
        for func in functions:
            result = func(result)
        return result

    return piped


# 延迟与重试

async def delay(ms: float) -> None:
    """挂起至少 ms 毫秒"""
    await anyio.sleep(max(ms, 0) / 1000)


async def retry(
    func: Callable[[], Union[Awaitable[T], T]],
    times: int = RETRY_DEFAULT_TIMES,
    delay_ms: float = RETRY_DEFAULT_DELAY_MS,
) -> T:
    """失败重试

    Args:
        func: 无参函数，可返回值或 awaitable
        times: 总尝试次数（包含第一次）
        delay_ms: 两次尝试之间的等待时间（毫秒），最后一次失败后不等待

    Returns:
        第一次成功的结果

    Raises:
        ValueError: times 不是正数，此时不会调用 func
        Exception: 所有尝试均失败时，抛出最后一次的异常
    """
    if times <= 0:
        raise ValueError("times must be positive")

    for attempt in range(1, times + 1):
        try:
            result = func()
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as e:
            if attempt == times:
                raise
            logger.warning("retry_attempt_failed", attempt=attempt, times=times, error=repr(e))
        await delay(delay_ms)

    raise AssertionError("unreachable")
