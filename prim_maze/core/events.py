from collections import Counter
from typing import Iterator, List, NamedTuple, Optional

# Event Types
EVT_ADMIT = 0x01
EVT_CARVE = 0x02
EVT_DRAW = 0x03
EVT_STALE = 0x04


class GenerationEvent(NamedTuple):
    kind: int
    row: int
    col: int
    direction: Optional[int] = None


class EventLog:
    """
    In-memory record of what happened during one generation run.
    The Grid reports admissions and carves, the generator reports draws.
    """
    def __init__(self):
        self.events: List[GenerationEvent] = []

    def log_admit(self, row: int, col: int):
        self.events.append(GenerationEvent(EVT_ADMIT, row, col))

    def log_carve(self, row: int, col: int, direction: int):
        self.events.append(GenerationEvent(EVT_CARVE, row, col, int(direction)))

    def log_draw(self, row: int, col: int, direction: int, stale: bool = False):
        kind = EVT_STALE if stale else EVT_DRAW
        self.events.append(GenerationEvent(kind, row, col, int(direction)))

    def stream_events(self, kind: Optional[int] = None) -> Iterator[GenerationEvent]:
        for event in self.events:
            if kind is None or event.kind == kind:
                yield event

    def counts(self) -> Counter:
        return Counter(event.kind for event in self.events)

    def clear(self):
        self.events = []

    def __len__(self):
        return len(self.events)
