from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Tuple, Type, TypeVar

T = TypeVar("T")


class EventBus:
    """Synchronous publisher for battle outcomes, keyed by event class."""

    def __init__(self) -> None:
        self._subscribers: Dict[Type[Any], List[Callable[[Any], None]]] = {}

    def subscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        self._subscribers.setdefault(event_type, []).append(handler)  # type: ignore[arg-type]

    def emit(self, event: Any) -> None:
        """Call the handlers of the event class and of each of its bases."""
        for cls in type(event).__mro__:
            for handler in list(self._subscribers.get(cls, ())):
                handler(event)


@dataclass(frozen=True)
class BattleWon:
    enemy_id: str
    total_power: float
    enemy_power: float


@dataclass(frozen=True)
class BattleAbandoned:
    enemy_id: str
    returned_cards: Tuple[str, ...]  # card ids, in slot order
