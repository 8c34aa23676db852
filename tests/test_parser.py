"""Tests for parsing upstream conversation records into snapshots."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

import pytest

from pet_momentum.core.interfaces import SnapshotError
from pet_momentum.ingestion import ConversationParser


@pytest.fixture
def parser() -> ConversationParser:
    return ConversationParser()


def test_parser_reads_camel_case_records(parser: ConversationParser) -> None:
    snapshot = parser.parse(
        {
            "id": 42,
            "customerName": "Carla Dias",
            "customerPhone": "+55 31 97777-2222",
            "petName": "Thor",
            "lastMessage": "Quanto custa a vacina?",
            "timestamp": "14:05",
            "unread": 2,
            "isAIHandled": True,
            "status": "ai_handled",
            "contact_id": "c-9",
            "updated_at": "2025-10-26T11:30:00Z",
            "extra": {"ignored": True},
        }
    )

    assert snapshot.id == "42"
    assert snapshot.customer_name == "Carla Dias"
    assert snapshot.pet_name == "Thor"
    assert snapshot.last_message == "Quanto custa a vacina?"
    assert snapshot.unread_count == 2
    assert snapshot.is_ai_handled is True
    assert snapshot.contact_id == "c-9"
    assert snapshot.updated_at == datetime(2025, 10, 26, 11, 30, tzinfo=timezone.utc)


def test_parser_reads_nested_contact_rows(parser: ConversationParser) -> None:
    snapshot = parser.parse(
        {
            "id": "conv-7",
            "status": "ai_handled",
            "updated_at": "2025-10-26T09:00:00+00:00",
            "whatsapp_contacts": {
                "name": "Diego",
                "phone": "5511988887777",
                "pets": [{"name": "Luna"}],
            },
            "whatsapp_messages": [{"content": "Bom dia"}, {"content": "older"}],
        }
    )

    assert snapshot.customer_name == "Diego"
    assert snapshot.customer_phone == "5511988887777"
    assert snapshot.pet_name == "Luna"
    assert snapshot.last_message == "Bom dia"
    assert snapshot.is_ai_handled is True


def test_parser_normalises_missing_and_malformed_fields(
    parser: ConversationParser,
) -> None:
    snapshot = parser.parse(
        {
            "id": "x",
            "unreadCount": -5,
            "updatedAt": "yesterday-ish",
            "lastMessage": None,
        }
    )

    assert snapshot.customer_name == "Cliente Especial"
    assert snapshot.customer_phone == ""
    assert snapshot.pet_name is None
    assert snapshot.last_message == ""
    assert snapshot.unread_count == 0
    assert snapshot.updated_at is None
    assert snapshot.is_ai_handled is False


@pytest.mark.parametrize("unread", ["lots", None, True, 3.7])
def test_parser_coerces_unread(parser: ConversationParser, unread: object) -> None:
    snapshot = parser.parse({"id": "y", "unread": unread})

    assert snapshot.unread_count in (0, 3)


def test_naive_timestamps_assumed_utc(parser: ConversationParser) -> None:
    snapshot = parser.parse({"id": "z", "updated_at": "2025-10-26T08:15:00"})

    assert snapshot.updated_at == datetime(2025, 10, 26, 8, 15, tzinfo=timezone.utc)


@pytest.mark.parametrize("record", [{"lastMessage": "oi"}, {"id": "  "}, ["id", 1]])
def test_parser_rejects_unusable_records(parser: ConversationParser, record: object) -> None:
    with pytest.raises(SnapshotError):
        parser.parse(record)  # type: ignore[arg-type]


def test_parse_many_skips_and_logs(
    parser: ConversationParser, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.WARNING, logger="pet_momentum.ingestion.parser"):
        snapshots = parser.parse_many([{"id": "1"}, {}, {"id": "2"}])

    assert [snapshot.id for snapshot in snapshots] == ["1", "2"]
    assert "Skipping conversation record 1" in caplog.text


def test_parse_many_keeps_records_with_unrepresentable_counts(
    parser: ConversationParser,
) -> None:
    snapshots = parser.parse_many(
        [
            {"id": "1", "unread": float("inf")},
            {"id": "2", "lastMessage": "oi"},
            {"id": "3", "unreadCount": float("-inf")},
        ]
    )

    assert [snapshot.id for snapshot in snapshots] == ["1", "2", "3"]
    assert [snapshot.unread_count for snapshot in snapshots] == [0, 0, 0]
