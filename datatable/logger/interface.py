"""Logger interface.

Components accept any object implementing this interface, so applications can
route datatable log output into their own logging setup.
"""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Abstract logger used throughout the datatable package."""

    @abstractmethod
    def debug(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs) -> None:
        pass
