"""Console logger backed by the standard logging module."""

import logging
import sys
from typing import Any, Dict, Optional, Union

from datatable.logger.interface import Logger


class ConsoleLogger(Logger):
    """Logger that writes formatted records to stderr.

    Keyword arguments passed to the log methods are appended to the message as
    ``key=value`` pairs.
    """

    def __init__(
        self,
        name: str = "datatable",
        level: Union[int, str] = logging.INFO,
        format_string: Optional[str] = None,
    ):
        """
        Args:
            name: Name of the underlying logging.Logger
            level: Numeric level or level name (e.g. "DEBUG")
            format_string: Optional logging format string
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(self._resolve_level(level))
        self._logger.propagate = False

        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter(
                    format_string or "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            self._logger.addHandler(handler)

    @staticmethod
    def _resolve_level(level: Union[int, str]) -> int:
        if isinstance(level, int):
            return level
        return getattr(logging, str(level).upper(), logging.INFO)

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def level(self) -> int:
        return self._logger.level

    def _format(self, message: str, kwargs: Dict[str, Any]) -> str:
        if not kwargs:
            return message
        context = " ".join(f"{key}={value}" for key, value in kwargs.items())
        return f"{message} {context}"

    def debug(self, message: str, **kwargs) -> None:
        self._logger.debug(self._format(message, kwargs))

    def info(self, message: str, **kwargs) -> None:
        self._logger.info(self._format(message, kwargs))

    def warning(self, message: str, **kwargs) -> None:
        self._logger.warning(self._format(message, kwargs))

    def error(self, message: str, **kwargs) -> None:
        self._logger.error(self._format(message, kwargs))

    def critical(self, message: str, **kwargs) -> None:
        self._logger.critical(self._format(message, kwargs))
