"""Shared test helpers for TimerProgress."""


class SignalCollector:
    """Utility to capture pyqtSignal emissions (or hook calls) into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class ManualTicker:
    """Ticker that only fires when told to."""

    def __init__(self):
        self.interval_ms = None
        self.callback = None
        self.cancelled = False

    def start(self, interval_ms, callback):
        self.interval_ms = interval_ms
        self.callback = callback

    def cancel(self):
        self.cancelled = True

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            if self.cancelled or self.callback is None:
                return
            self.callback()


def run_ticks(clock: FakeClock, ticker: ManualTicker, count: int,
              spacing: int = 1000) -> None:
    """Advance the clock by ``spacing`` ms before each of ``count`` ticks."""
    for _ in range(count):
        clock.advance(spacing)
        ticker.fire()
