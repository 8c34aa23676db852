"""Ingestion of upstream conversation records."""

from .parser import ConversationParser

__all__ = ["ConversationParser"]
