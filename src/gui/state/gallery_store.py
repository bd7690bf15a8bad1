"""GalleryStore: the single owner of a viewing session's state.

The store wraps an injected, read-only ``GalleryCollection`` and the current
``ViewState``. Every operation replaces the state snapshot and then
publishes ``GUIEvent.GALLERY_STATE_CHANGED`` on the store's EventBus with a
``StateChange`` payload naming the store. Several stores may share one bus;
``subscribe`` only delivers this store's changes, unwrapped to the new
ViewState. Views subscribe and re-project on each notification.

Navigation wraps around in both directions and always hides the
description. All operations are total: the collection is non-empty and
fixed-size, so ``current_index`` stays valid by construction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from domain.models import GalleryCollection, GalleryItem, ViewState
from gui.services.event_bus import Event, EventBus, EventHandler, GUIEvent, Subscription

__all__ = ["GalleryStore", "StateChange"]

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StateChange:
    """Bus payload for GALLERY_STATE_CHANGED."""

    source: GalleryStore
    state: ViewState


class GalleryStore:
    def __init__(self, collection: GalleryCollection, *, event_bus: Optional[EventBus] = None):
        self._collection = collection
        self._bus = event_bus if event_bus is not None else EventBus()
        self._state = ViewState()

    # Accessors --------------------------------------------------------
    @property
    def collection(self) -> GalleryCollection:
        return self._collection

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def event_bus(self) -> EventBus:
        return self._bus

    def current_item(self) -> GalleryItem:
        return self._collection[self._state.current_index]

    # Operations -------------------------------------------------------
    def next(self) -> ViewState:
        index = (self._state.current_index + 1) % len(self._collection)
        return self._apply(ViewState(current_index=index, description_visible=False), "next")

    def previous(self) -> ViewState:
        size = len(self._collection)
        index = (self._state.current_index - 1 + size) % size
        return self._apply(ViewState(current_index=index, description_visible=False), "previous")

    def toggle_description(self) -> ViewState:
        state = ViewState(
            current_index=self._state.current_index,
            description_visible=not self._state.description_visible,
        )
        return self._apply(state, "toggle_description")

    # Observer contract ------------------------------------------------
    def subscribe(self, handler: EventHandler) -> Subscription:
        """Call ``handler`` with an Event whose payload is this store's new ViewState."""

        def _own_changes(event: Event) -> None:
            change = event.payload
            if isinstance(change, StateChange) and change.source is self:
                handler(Event(name=event.name, payload=change.state, timestamp=event.timestamp))

        return self._bus.subscribe(GUIEvent.GALLERY_STATE_CHANGED, _own_changes)

    def unsubscribe(self, sub: Subscription) -> None:
        self._bus.unsubscribe(sub)

    def _apply(self, state: ViewState, action: str) -> ViewState:
        self._state = state
        _log.debug(
            "%s -> index=%d description_visible=%s",
            action,
            state.current_index,
            state.description_visible,
        )
        self._bus.publish(GUIEvent.GALLERY_STATE_CHANGED, StateChange(self, state))
        return state
