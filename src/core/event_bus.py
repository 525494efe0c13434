"""EventBus - synchronous event delivery between the item core and its hosts.

Rules:
- Events carry identifiers and small payloads only, never live objects
- Propagation depth is capped at MAX_DEPTH
- A failing handler is logged and does not stop the others
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from src.core.logging import get_logger

logger = get_logger(__name__)

MAX_DEPTH = 5  # nested emit limit


@dataclass
class GameEvent:
    """Event data container

    Args:
        event_type: event name (e.g. "item_picked_up", "items_distributed")
        data: payload (ids and counts, no heavy objects)
        source: emitting service name
    """

    event_type: str
    data: Dict[str, Any]
    source: str

    _depth: int = field(default=0, repr=False)


EventHandler = Callable[[GameEvent], None]


class EventBus:
    """Synchronous event bus

    Usage:
        bus = EventBus()
        bus.subscribe("item_picked_up", hud.refresh_inventory)
        bus.emit(GameEvent(event_type="item_picked_up", data={"item_id": "axe_hand"}, source="item_service"))
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._current_depth: int = 0

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)
        logger.debug("EventBus subscribe: %s -> %s", event_type, handler.__qualname__)

    def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        if event_type in self._handlers:
            try:
                self._handlers[event_type].remove(handler)
                logger.debug(
                    "EventBus unsubscribe: %s -> %s", event_type, handler.__qualname__
                )
            except ValueError:
                logger.warning(
                    "Handler not registered: %s -> %s", event_type, handler.__qualname__
                )

    def emit(self, event: GameEvent) -> None:
        """Deliver an event to its handlers in subscription order.

        Events emitted deeper than MAX_DEPTH are dropped with a warning.
        """
        if self._current_depth >= MAX_DEPTH:
            logger.warning(
                "EventBus depth exceeded (%d): %s:%s dropped",
                MAX_DEPTH,
                event.source,
                event.event_type,
            )
            return

        event._depth = self._current_depth

        handlers = self._handlers.get(event.event_type, [])
        if not handlers:
            logger.debug("EventBus: no subscribers for %s", event.event_type)
            return

        logger.debug(
            "EventBus dispatch: %s (source=%s, depth=%d, handlers=%d)",
            event.event_type,
            event.source,
            self._current_depth,
            len(handlers),
        )

        self._current_depth += 1
        try:
            for handler in list(handlers):
                try:
                    handler(event)
                except Exception:
                    logger.exception(
                        "EventBus handler error: %s (event=%s)",
                        handler.__qualname__,
                        event.event_type,
                    )
        finally:
            self._current_depth -= 1

    def clear(self) -> None:
        """Drop every subscription (tests)."""
        self._handlers.clear()
        self._current_depth = 0

    @property
    def handler_count(self) -> int:
        return sum(len(h) for h in self._handlers.values())
