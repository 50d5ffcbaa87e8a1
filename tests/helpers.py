"""Shared test helpers."""

from __future__ import annotations


class RecordingLogger:
    """LoggerProtocol implementation that keeps every message for assertions."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def debug(self, message: str) -> None:
        self.messages.append(('debug', message))

    def info(self, message: str) -> None:
        self.messages.append(('info', message))

    def warning(self, message: str) -> None:
        self.messages.append(('warning', message))

    def error(self, message: str) -> None:
        self.messages.append(('error', message))

    def texts(self, level: str = 'debug') -> list[str]:
        return [message for msg_level, message in self.messages if msg_level == level]
