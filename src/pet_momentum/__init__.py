"""Conversation momentum scoring for a pet-care CRM."""

__version__ = "0.1.0"
