"""Abstract notification sink.

Fulfillment and pruning events leave the domain through this interface.
A console printer, a logger or a real delivery service can sit behind it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bookstore.domain.model.events import CatalogEvent


class NotificationSink(ABC):

    @abstractmethod
    def notify(self, event: CatalogEvent) -> None:
        """Deliver a single event."""
