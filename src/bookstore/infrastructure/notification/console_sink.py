"""Notification sink that prints human-readable lines to the terminal."""

from __future__ import annotations

import click

from bookstore.domain.model.events import (
    CatalogEvent,
    DigitalDeliveryFulfilled,
    ItemRemoved,
    PurchaseRejected,
    ShipmentFulfilled,
)
from bookstore.domain.notification_sink import NotificationSink


def render_event(event: CatalogEvent) -> str:
    """Format an event the way the store's transcript shows it."""
    if isinstance(event, ShipmentFulfilled):
        return f'x{event.quantity} "{event.title}" has been shipped to address: {event.address}'
    if isinstance(event, DigitalDeliveryFulfilled):
        return (
            f"\"{event.title}\" has been sent via email as '.{event.file_format}' "
            f"to email: {event.email}"
        )
    if isinstance(event, PurchaseRejected):
        return f"Error: {event.reason.message}"
    if isinstance(event, ItemRemoved):
        return f'Removing outdated book: "{event.title}" ({event.year})...'
    raise TypeError(f"Unsupported event type: {type(event).__name__}")


class ConsoleNotificationSink(NotificationSink):

    def notify(self, event: CatalogEvent) -> None:
        click.echo(render_event(event))
