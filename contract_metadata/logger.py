"""
Console logger - implements LoggerProtocol by printing to stdout.
"""

from __future__ import annotations

from datetime import UTC, datetime

from contract_metadata.config import settings


class ConsoleLogger:
    """
    Logger implementation that prints timestamped messages.

    Debug and info messages are only shown in verbose mode.
    """

    def __init__(self, verbose: bool | None = None) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, show debug/info messages. Defaults to the VERBOSE setting.
        """
        self.verbose = settings.VERBOSE if verbose is None else verbose

    def _timestamp(self) -> str:
        return datetime.now(UTC).strftime('%Y-%m-%d %H:%M:%S')

    def debug(self, message: str) -> None:
        if self.verbose:
            print(f'[{self._timestamp()}] [DEBUG] {message}')

    def info(self, message: str) -> None:
        if self.verbose:
            print(f'[{self._timestamp()}] [INFO] {message}')

    def warning(self, message: str) -> None:
        print(f'[{self._timestamp()}] [WARNING] {message}')

    def error(self, message: str) -> None:
        print(f'[{self._timestamp()}] [ERROR] {message}')
