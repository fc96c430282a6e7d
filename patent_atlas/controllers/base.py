"""Base controller class for command-driven front ends."""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Dict, Optional

import structlog
from pydantic import BaseModel

from ..exceptions import ValidationFailure
from ..models.commands import CommandType
from ..utils.api_client import PatentApiClient
from ..utils.error_tracking import capture_exception
from ..utils.observability import log_error

logger = structlog.get_logger(__name__)

Handler = Callable[[Any], Awaitable[Any]]


class BaseController(ABC):
    """Base class for controllers that turn user intents into component calls.

    Commands are processed one at a time on the event loop. A failing command
    never stops the controller: validation problems are shown to the user and
    anything unexpected is logged and reported.
    """

    def __init__(self, api_client: PatentApiClient):
        self.api_client = api_client
        self.running = False
        self.handlers: Dict[CommandType, Handler] = {}
        self.register_handlers()

    @abstractmethod
    def register_handlers(self):
        """Register a handler for every supported command type."""

    @abstractmethod
    def report_validation_failure(self, error: ValidationFailure):
        """Show a validation problem to the user."""

    def register(self, command_type: CommandType, handler: Handler):
        self.handlers[command_type] = handler
        logger.debug("Registered command handler", command_type=command_type.value)

    async def start(self):
        """Start the controller."""
        try:
            await self.api_client.connect()
            self.running = True
            logger.info("Controller started")
        except Exception as e:
            logger.error("Failed to start controller", error=str(e))
            raise

    async def stop(self):
        """Stop the controller."""
        self.running = False
        try:
            await self.api_client.disconnect()
            logger.info("Controller stopped")
        except Exception as e:
            logger.error("Error stopping controller", error=str(e))

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.stop()

    async def dispatch(self, command: BaseModel) -> Optional[Any]:
        """Run the handler registered for the command's type."""
        command_type = command.type
        handler = self.handlers.get(command_type)
        if handler is None:
            logger.error("No handler for command", command_type=command_type.value)
            return None

        try:
            return await handler(command)
        except ValidationFailure as e:
            logger.info("Command rejected", command_type=command_type.value, reason=str(e))
            self.report_validation_failure(e)
        except Exception as e:
            log_error("command_failed", e, command_type=command_type.value)
            capture_exception(e, {"command_type": command_type.value})
        return None
