"""
Base Service.

Base class for all services providing common patterns for business logic.
Services orchestrate repositories and implement business rules; they
receive their repositories ready-made instead of building them.

Usage:
    from notes_api.services.base import BaseService

    class NoteService(BaseService):
        def __init__(self, repo: NoteRepository) -> None:
            super().__init__()
            self.repo = repo
"""

from typing import Any

from notes_api.core.logging import get_logger


class BaseService:
    """
    Base class for all services.

    Provides a logger named after the concrete service module and
    helpers that tag every record with the service name.
    """

    def __init__(self) -> None:
        self._logger = get_logger(self.__class__.__module__)

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
