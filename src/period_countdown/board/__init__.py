"""Board — табло обратного отсчёта и цикл его пересчёта.

Внешний слой над ядром:
- CountdownBoard собирает строки табло для момента now
- CountdownTicker — явный цикл sample → evaluate → callback
"""

from .countdown_board import CountdownBoard
from .ticker import (
    CountdownSnapshot,
    CountdownTicker,
    TickerConfig,
    system_clock,
)

__all__ = [
    "CountdownBoard",
    "CountdownSnapshot",
    "CountdownTicker",
    "TickerConfig",
    "system_clock",
]
