"""Logging adapters implementing LoggerProtocol."""

from schoolvault.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
