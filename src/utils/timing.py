"""
Timing — Измерение времени выполнения

Часы передаются явно (clock), по умолчанию time.perf_counter.
Это позволяет подменять время в тестах без глобального состояния.

Преобразования строка <-> Unix timestamp выполняются в явно заданной
зоне (по умолчанию UTC), а не в локальной зоне процесса.
"""

import time
from datetime import datetime, timezone, tzinfo
from typing import Any, Callable, Optional

Clock = Callable[[], float]


class Timer:
    """Таймер: start() / stop() / elapsed_ms()."""

    def __init__(self, clock: Clock = time.perf_counter):
        self._clock = clock
        self._start: Optional[float] = None
        self._end: Optional[float] = None
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        self._running = True
        self._end = None
        self._start = self._clock()

    def stop(self) -> None:
        if not self._running:
            raise RuntimeError("Timer is not running")
        self._end = self._clock()
        self._running = False

    def elapsed_ms(self) -> float:
        """
        Прошедшее время между start() и stop() в миллисекундах.

        Raises:
            RuntimeError: если таймер запущен или ещё не запускался
        """
        if self._running:
            raise RuntimeError("Timer must be stopped before reading elapsed time")
        if self._start is None or self._end is None:
            raise RuntimeError("Timer has not been started")
        return (self._end - self._start) * 1000.0


def measure_execution_time(
    fn: Callable[..., Any], *args: Any, clock: Clock = time.perf_counter, **kwargs: Any
) -> float:
    """
    Время выполнения fn(*args, **kwargs) в миллисекундах.

    Результат fn отбрасывается; исключения fn пробрасываются.
    """
    timer = Timer(clock)
    timer.start()
    fn(*args, **kwargs)
    timer.stop()
    return timer.elapsed_ms()


# =============================================================================
# TIMESTAMPS
# =============================================================================


def str_to_timestamp(s: str, fmt: str, tz: tzinfo = timezone.utc) -> int:
    """
    Строка в Unix timestamp (секунды).

    Args:
        s: Строка со временем
        fmt: Формат strptime, например "%d/%m/%Y %H:%M:%S"
        tz: Зона, в которой записано время (если в fmt нет %z)

    Raises:
        ValueError: если s не соответствует fmt

    Examples:
        >>> str_to_timestamp("01/01/1970 00:01:00", "%d/%m/%Y %H:%M:%S")
        60
    """
    parsed = datetime.strptime(s, fmt)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return int(parsed.timestamp())


def timestamp_to_str(timestamp: float, fmt: str, tz: tzinfo = timezone.utc) -> str:
    """Unix timestamp в строку формата strftime в зоне tz."""
    return datetime.fromtimestamp(timestamp, tz).strftime(fmt)
