"""
防抖与节流
单线程协作式调度：定时器挂在 asyncio 事件循环上，状态由每个包装实例独占
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from functools import update_wrapper
from typing import Any, Callable, Dict, Generic, Optional, Tuple, TypeVar

from ..core.models import DebounceOptions, ThrottleOptions
from ..core.types import Scheduler, TimerHandle
from .logging import get_logger

R = TypeVar('R')

logger = get_logger(__name__)


class LoopScheduler:
    """基于当前运行事件循环的调度器（毫秒）

    必须在 asyncio 事件循环内使用（包括 anyio 的 asyncio 后端）；
    循环外或 trio 下调用会由 asyncio 抛出 RuntimeError，此时请传入自定义 scheduler。
    """

    def now(self) -> float:
        return asyncio.get_running_loop().time() * 1000.0

    def call_later(self, delay_ms: float, callback: Callable[[], Any]) -> TimerHandle:
        return asyncio.get_running_loop().call_later(max(delay_ms, 0.0) / 1000.0, callback)


@dataclass
class DebounceState(Generic[R]):
    """防抖包装实例的全部可变状态"""

    timer: Optional[TimerHandle] = None
    pending_args: Optional[Tuple[Any, ...]] = None
    pending_kwargs: Dict[str, Any] = field(default_factory=dict)
    result: Optional[R] = None
    burst_start: Optional[float] = None
    last_invoke: Optional[float] = None

    @property
    def has_pending_call(self) -> bool:
        return self.pending_args is not None

    def clear_pending(self) -> None:
        self.pending_args = None
        self.pending_kwargs = {}


class Debounced(Generic[R]):
    """防抖后的可调用对象，附带 cancel / flush / pending"""

    def __init__(
        self,
        func: Callable[..., R],
        options: DebounceOptions,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        update_wrapper(self, func)
        self._func = func
        self.options = options
        self._scheduler: Scheduler = scheduler if scheduler is not None else LoopScheduler()
        self.state: DebounceState[R] = DebounceState()

    def __call__(self, *args: Any, **kwargs: Any) -> Optional[R]:
        now = self._scheduler.now()
        state = self.state

        # 调度器迟到：先补做本应已触发的后沿
        if state.timer is not None and self._max_wait_elapsed(now):
            self._cancel_timer()
            self._trailing_edge()

        state.pending_args = args
        state.pending_kwargs = kwargs

        if state.timer is None:
            return self._leading_edge(now)

        self._schedule_trailing(self._remaining_wait(now))
        return state.result

    def cancel(self) -> None:
        """取消定时器并丢弃待执行参数，不调用原函数"""
        self._cancel_pending()

    def flush(self) -> Optional[R]:
        """立即执行待定的后沿调用"""
        if self.state.timer is None:
            return self.state.result
        self._cancel_timer()
        return self._trailing_edge()

    def pending(self) -> bool:
        return self.state.timer is not None

    # 状态迁移

    def _leading_edge(self, now: float) -> Optional[R]:
        self.state.burst_start = now
        self._schedule_trailing(self.options.first_delay_ms)
        if self.options.leading and not self._cooling_down(now):
            return self._force_invoke()
        return self.state.result

    def _trailing_edge(self) -> Optional[R]:
        state = self.state
        state.timer = None
        state.burst_start = None
        if self.options.trailing and state.has_pending_call:
            return self._force_invoke()
        state.clear_pending()
        return state.result

    def _schedule_trailing(self, delay_ms: float) -> None:
        self._cancel_timer()
        self.state.timer = self._scheduler.call_later(delay_ms, self._timer_expired)

    def _cancel_timer(self) -> None:
        if self.state.timer is not None:
            self.state.timer.cancel()
            self.state.timer = None

    def _cancel_pending(self) -> None:
        self._cancel_timer()
        state = self.state
        state.clear_pending()
        state.burst_start = None
        state.last_invoke = None

    def _force_invoke(self) -> R:
        state = self.state
        args = state.pending_args or ()
        kwargs = state.pending_kwargs
        state.clear_pending()
        state.last_invoke = self._scheduler.now()
        state.result = self._func(*args, **kwargs)
        return state.result

    def _timer_expired(self) -> None:
        self.state.timer = None
        try:
            self._trailing_edge()
        except Exception:
            # 后沿在定时器回调中执行，异常只能交给事件循环的异常处理器
            logger.exception("debounce_trailing_failed", func=getattr(self._func, "__name__", repr(self._func)))
            raise

    # 时间计算

    def _max_wait_elapsed(self, now: float) -> bool:
        max_wait = self.options.max_wait_ms
        burst_start = self.state.burst_start
        return max_wait is not None and burst_start is not None and now - burst_start >= max_wait

    def _remaining_wait(self, now: float) -> float:
        wait = self.options.wait_ms
        max_wait = self.options.max_wait_ms
        if max_wait is None or self.state.burst_start is None:
            return wait
        return max(0.0, min(wait, self.state.burst_start + max_wait - now))

    def _cooling_down(self, now: float) -> bool:
        """设置了 max_wait 时，距上次执行不足 wait_ms 的前沿不再执行"""
        last_invoke = self.state.last_invoke
        if self.options.max_wait_ms is None or last_invoke is None:
            return False
        return now - last_invoke < self.options.wait_ms

    def __repr__(self) -> str:
        return f"<Debounced {getattr(self._func, '__qualname__', self._func)!r} pending={self.pending()}>"


def debounce(
    func: Callable[..., R],
    wait_ms: float,
    *,
    leading: bool = False,
    trailing: bool = True,
    max_wait_ms: Optional[float] = None,
    scheduler: Optional[Scheduler] = None,
) -> Debounced[R]:
    """防抖：静默期 wait_ms 结束后才调用 func

    Args:
        func: 被包装的函数
        wait_ms: 静默期（毫秒）
        leading: 是否在一轮调用开始时立即执行
        trailing: 是否在静默期结束时以最后一次参数执行
        max_wait_ms: 一轮调用最多被推迟的时间，超过后强制以最新参数执行
        scheduler: 自定义调度器，默认使用当前事件循环

    Returns:
        Debounced 包装对象；未触发调用时返回上一次的结果（从未调用过则为 None）

    Raises:
        pydantic.ValidationError: 时间参数为负
    """
    options = DebounceOptions(
        wait_ms=wait_ms,
        leading=leading,
        trailing=trailing,
        max_wait_ms=max_wait_ms,
    )
    return Debounced(func, options, scheduler)


def throttle(
    func: Callable[..., R],
    wait_ms: float,
    *,
    leading: bool = True,
    trailing: bool = True,
    scheduler: Optional[Scheduler] = None,
) -> Debounced[R]:
    """节流：每 wait_ms 内最多执行一次，基于 max_wait 等于间隔的防抖实现"""
    options = ThrottleOptions(wait_ms=wait_ms, leading=leading, trailing=trailing)
    return Debounced(func, options.to_debounce(), scheduler)


__all__ = [
    "LoopScheduler",
    "DebounceState",
    "Debounced",
    "debounce",
    "throttle",
]
