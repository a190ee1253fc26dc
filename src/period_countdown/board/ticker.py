"""Countdown Ticker — явный цикл пересчёта табло

Периодический пересчёт принадлежит вызывающему слою, а не ядру:
- clock() возвращает текущий Instant;
- каждый тик: now = clock() → board.evaluate(now, ...) → on_tick(snapshot) → sleep(interval).

Тики независимы и идемпотентны: одинаковый now → одинаковый snapshot.entries.
clock и sleep инжектируются, поэтому цикл детерминированно тестируется.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from period_countdown.board.countdown_board import CountdownBoard
from period_countdown.core.calendar_context import Calendar
from period_countdown.core.domain.countdown import CountdownEntry
from period_countdown.core.domain.instant import Instant
from period_countdown.core.domain.target import CustomTarget

logger = logging.getLogger(__name__)

Clock = Callable[[], Instant]
TargetsProvider = Callable[[], tuple[Sequence[CustomTarget], Optional[CustomTarget]]]


@dataclass(frozen=True)
class TickerConfig:
    """Конфигурация цикла пересчёта."""

    interval_sec: float = 1.0


@dataclass(frozen=True)
class CountdownSnapshot:
    """Результат одного тика."""

    tick_index: int
    now: Instant
    entries: tuple[CountdownEntry, ...]


def system_clock(calendar: Calendar) -> Clock:
    """Часы реального времени в зоне календаря."""

    def clock() -> Instant:
        return Instant.from_epoch_ns(time.time_ns(), calendar.timezone)

    return clock


class CountdownTicker:
    """Цикл пересчёта табло с фиксированным интервалом."""

    def __init__(
        self,
        board: CountdownBoard,
        clock: Clock,
        sleep: Callable[[float], None] = time.sleep,
        config: Optional[TickerConfig] = None,
    ):
        """
        Args:
            board: табло для пересчёта
            clock: источник текущего момента
            sleep: функция ожидания (default: time.sleep)
            config: конфигурация (default: TickerConfig())

        Raises:
            ValueError: interval_sec <= 0
        """
        self.board = board
        self.clock = clock
        self.sleep = sleep
        self.config = config or TickerConfig()
        if self.config.interval_sec <= 0:
            raise ValueError(f"interval_sec must be positive, got {self.config.interval_sec}")

        self._tick_index = 0

    def tick(
        self,
        custom_targets: Sequence[CustomTarget] = (),
        link_target: Optional[CustomTarget] = None,
    ) -> CountdownSnapshot:
        """Один пересчёт: sample clock → evaluate."""
        now = self.clock()
        entries = tuple(self.board.evaluate(now, custom_targets, link_target))
        snapshot = CountdownSnapshot(tick_index=self._tick_index, now=now, entries=entries)
        self._tick_index += 1
        logger.debug(
            "Tick %d at %s: %d entries", snapshot.tick_index, now.isoformat(), len(entries)
        )
        return snapshot

    def run(
        self,
        on_tick: Callable[[CountdownSnapshot], None],
        max_ticks: Optional[int] = None,
        targets_provider: Optional[TargetsProvider] = None,
    ) -> int:
        """Цикл пересчёта.

        Args:
            on_tick: колбэк для каждого snapshot
            max_ticks: число тиков (None — бесконечно, до KeyboardInterrupt)
            targets_provider: источник (custom_targets, link_target) перед каждым тиком

        Returns:
            Число выполненных тиков
        """
        if max_ticks is not None and max_ticks < 0:
            raise ValueError(f"max_ticks must be non-negative, got {max_ticks}")

        logger.info(
            "Countdown ticker started: interval=%.3fs max_ticks=%s",
            self.config.interval_sec,
            max_ticks,
        )
        done = 0
        try:
            while max_ticks is None or done < max_ticks:
                custom_targets, link_target = (
                    targets_provider() if targets_provider is not None else ((), None)
                )
                on_tick(self.tick(custom_targets, link_target))
                done += 1
                if max_ticks is None or done < max_ticks:
                    self.sleep(self.config.interval_sec)
        except KeyboardInterrupt:
            logger.info("Countdown ticker interrupted after %d ticks", done)
        else:
            logger.info("Countdown ticker stopped after %d ticks", done)
        return done
