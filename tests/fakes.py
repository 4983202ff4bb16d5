from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass
class FakeTimer:
    due: float
    callback: Callable[[], Any]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass
class FakeScheduler:
    """手动推进的毫秒时钟，到期回调按 (到期时间, 注册顺序) 触发"""

    current: float = 0.0
    _queue: list[tuple[float, int, FakeTimer]] = field(default_factory=list)
    _counter: itertools.count = field(default_factory=itertools.count)

    def now(self) -> float:
        return self.current

    def call_later(self, delay_ms: float, callback: Callable[[], Any]) -> FakeTimer:
        timer = FakeTimer(self.current + max(delay_ms, 0.0), callback)
        heapq.heappush(self._queue, (timer.due, next(self._counter), timer))
        return timer

    def advance(self, ms: float) -> None:
        target = self.current + ms
        while self._queue and self._queue[0][0] <= target:
            due, _, timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self.current = due
            timer.callback()
        self.current = target

    def active_timers(self) -> int:
        return sum(1 for _, _, timer in self._queue if not timer.cancelled)


@dataclass
class Recorder:
    """记录每次调用的参数，返回值为第一个参数"""

    calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = field(default_factory=list)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.calls.append((args, kwargs))
        return args[0] if args else None

    @property
    def args(self) -> list[Any]:
        return [call_args[0] if call_args else None for call_args, _ in self.calls]
