"""
Base Command Handler
Abstract base for all command handlers
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from shared.application.base_command import BaseCommand
from shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

TCommand = TypeVar("TCommand", bound=BaseCommand)
TResult = TypeVar("TResult")


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """
    Abstract base class for command handlers.

    Command handlers load an aggregate through a unit of work, call one
    domain method, commit, and return a DTO.

    Type Parameters:
        TCommand: Command type this handler processes
        TResult: Return type of the handler

    Example:
        class DeleteProductHandler(CommandHandler[DeleteProductCommand, None]):
            async def handle(self, command: DeleteProductCommand) -> None:
                async with self._uow:
                    ...
    """

    @abstractmethod
    async def handle(self, command: TCommand) -> TResult:
        """
        Handle the command and return result.

        Args:
            command: Command to execute

        Returns:
            Result of command execution

        Raises:
            ValidationError: If command data violates an invariant
            NotFoundError: If the target aggregate does not exist
            InvalidOperationError: If the aggregate state forbids the change
        """

    async def __call__(self, command: TCommand) -> TResult:
        """
        Make handler callable directly.

        Adds logging around command execution.
        """
        command_name = command.__class__.__name__

        logger.info("Executing command", command=command_name)

        try:
            result = await self.handle(command)
            logger.info("Command executed successfully", command=command_name)
            return result
        except Exception as e:
            logger.warning(
                "Command execution failed",
                command=command_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise
