"""Sounds Like Home voice-prompt recording service."""
