"""Utilities for parsing upstream conversation records into snapshots."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..core.datetime_utils import parse_timestamp
from ..core.interfaces import SnapshotError
from ..core.models import ConversationSnapshot

LOGGER = logging.getLogger(__name__)

DEFAULT_CUSTOMER_NAME = "Cliente Especial"

_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "customer_name": ("customerName", "customer_name"),
    "customer_phone": ("customerPhone", "customer_phone"),
    "pet_name": ("petName", "pet_name"),
    "last_message": ("lastMessage", "last_message"),
    "unread_count": ("unreadCount", "unread_count", "unread"),
    "is_ai_handled": ("isAiHandled", "isAIHandled", "is_ai_handled"),
    "status": ("status",),
    "updated_at": ("updatedAt", "updated_at"),
    "timestamp": ("timestamp",),
    "contact_id": ("contactId", "contact_id"),
}


class ConversationParser:
    """Convert raw conversation records into normalized snapshots."""

    def parse(self, record: Mapping[str, Any]) -> ConversationSnapshot:
        """Build a :class:`ConversationSnapshot`, ignoring unknown keys."""
        if not isinstance(record, Mapping):
            raise SnapshotError(f"Expected a mapping, got {type(record).__name__}")
        raw_id = record.get("id")
        if raw_id is None or str(raw_id).strip() == "":
            raise SnapshotError("Conversation record is missing an id")

        is_ai_handled = _coerce_bool(_lookup(record, "is_ai_handled"))
        status = _optional_text(_lookup(record, "status")) or ""
        if not is_ai_handled and status == "ai_handled":
            is_ai_handled = True

        contact = _nested_contact(record)
        pets = contact.get("pets")
        first_pet: Mapping[str, Any] = {}
        if isinstance(pets, list) and pets and isinstance(pets[0], Mapping):
            first_pet = pets[0]

        return ConversationSnapshot(
            id=str(raw_id),
            customer_name=_optional_text(
                _lookup(record, "customer_name") or contact.get("name")
            )
            or DEFAULT_CUSTOMER_NAME,
            customer_phone=_optional_text(
                _lookup(record, "customer_phone") or contact.get("phone")
            )
            or "",
            pet_name=_optional_text(_lookup(record, "pet_name") or first_pet.get("name")),
            last_message=_optional_text(
                _lookup(record, "last_message") or _nested_last_message(record)
            )
            or "",
            unread_count=_coerce_count(_lookup(record, "unread_count")),
            is_ai_handled=is_ai_handled,
            status=status,
            updated_at=parse_timestamp(_lookup(record, "updated_at")),
            timestamp=_optional_text(_lookup(record, "timestamp")),
            contact_id=_optional_text(_lookup(record, "contact_id")),
        )

    def parse_many(
        self, records: Iterable[Mapping[str, Any]]
    ) -> list[ConversationSnapshot]:
        """Parse records in order, skipping the ones that cannot be parsed."""
        snapshots: list[ConversationSnapshot] = []
        for position, record in enumerate(records):
            try:
                snapshots.append(self.parse(record))
            except SnapshotError as exc:
                LOGGER.warning("Skipping conversation record %d: %s", position, exc)
        return snapshots


def _nested_contact(record: Mapping[str, Any]) -> Mapping[str, Any]:
    contact = record.get("whatsapp_contacts")
    return contact if isinstance(contact, Mapping) else {}


def _nested_last_message(record: Mapping[str, Any]) -> Any:
    # Messages arrive newest first.
    messages = record.get("whatsapp_messages")
    if isinstance(messages, list) and messages and isinstance(messages[0], Mapping):
        return messages[0].get("content")
    return None


def _lookup(record: Mapping[str, Any], field: str) -> Any:
    for key in _FIELD_ALIASES[field]:
        if key in record and record[key] is not None:
            return record[key]
    return None


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _coerce_count(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    try:
        count = int(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(count, 0)


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes"}
    return bool(value)


__all__ = ["ConversationParser"]
