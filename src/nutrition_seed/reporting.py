"""
Structured progress and event reporting for seed runs.

Generators and the clear engine report what they did through a
SeedReporter instead of printing directly. Listeners subscribe to the
reporter; ConsoleListener is the stock one and prints the familiar
"[seed] Inserted N weight entries" lines.

Event kinds:
- inserted: a step wrote rows (table label + count)
- info: anything else worth showing in verbose mode
- warning: recoverable problem (table missing during clear, photo download)
- error: a step failed
"""

import time
from dataclasses import dataclass, field
from typing import Callable

EVENT_INSERTED = "inserted"
EVENT_INFO = "info"
EVENT_WARNING = "warning"
EVENT_ERROR = "error"


@dataclass
class SeedEvent:
    """A single reported occurrence during a seed or clear run."""

    kind: str
    message: str
    table: str | None = None
    count: int | None = None


@dataclass
class SeedProgress:
    """Progress snapshot passed to the orchestrator's progress callback."""

    current_entity: str
    current_count: int
    total_count: int
    phase: str
    started_at: float = field(default_factory=time.time)


EventListener = Callable[[SeedEvent], None]
ProgressCallback = Callable[[SeedProgress], None]


class SeedReporter:
    """
    Collects events and fans them out to subscribed listeners.

    Example:
        reporter = SeedReporter()
        reporter.subscribe(ConsoleListener(verbose=True))
        reporter.inserted("weight entries", 152, table="weight_entries")
    """

    def __init__(self) -> None:
        self.events: list[SeedEvent] = []
        self._listeners: list[EventListener] = []

    def subscribe(self, listener: EventListener) -> None:
        self._listeners.append(listener)

    def emit(self, event: SeedEvent) -> SeedEvent:
        self.events.append(event)
        for listener in self._listeners:
            listener(event)
        return event

    def inserted(self, label: str, count: int, table: str | None = None) -> SeedEvent:
        return self.emit(
            SeedEvent(EVENT_INSERTED, f"[seed] Inserted {count} {label}", table=table, count=count)
        )

    def info(self, message: str, table: str | None = None) -> SeedEvent:
        return self.emit(SeedEvent(EVENT_INFO, message, table=table))

    def warning(self, message: str, table: str | None = None) -> SeedEvent:
        return self.emit(SeedEvent(EVENT_WARNING, message, table=table))

    def error(self, message: str, table: str | None = None) -> SeedEvent:
        return self.emit(SeedEvent(EVENT_ERROR, message, table=table))

    @property
    def warnings(self) -> list[str]:
        return [e.message for e in self.events if e.kind == EVENT_WARNING]

    @property
    def errors(self) -> list[str]:
        return [e.message for e in self.events if e.kind == EVENT_ERROR]

    def inserted_count(self, table: str) -> int:
        """Total rows reported as inserted into a table."""
        return sum(e.count or 0 for e in self.events if e.kind == EVENT_INSERTED and e.table == table)


class ConsoleListener:
    """Print events to stdout; only errors are shown unless verbose."""

    def __init__(self, verbose: bool = False) -> None:
        self.verbose = verbose

    def __call__(self, event: SeedEvent) -> None:
        if event.kind == EVENT_ERROR:
            print(f"ERROR: {event.message}")
        elif not self.verbose:
            return
        elif event.kind == EVENT_WARNING:
            print(f"WARNING: {event.message}")
        else:
            print(event.message)
