"""
Command Dispatcher.

Maps short menu codes to demo routines and runs the interactive loop.
Each demo gets its own client, released when the demo finishes. Any
failure is reported as the message chain of the exception and the loop
carries on.
"""

import logging
from types import MappingProxyType
from typing import Awaitable, Callable, List, Mapping, Optional

from azure.cosmos.aio import CosmosClient

from cosmos_client import ClientFactory
from core.console import Console

logger = logging.getLogger(__name__)

DemoRoutine = Callable[[CosmosClient], Awaitable[None]]

QUIT_CODE = "Q"

MENU = """Cosmos DB SQL API Python SDK demos
===============================================
DB Databases
CO Collections
DO Documents
IX Indexing
UP Users & Permissions

Cosmos DB SQL API Server-Side Programming demos
===============================================
SP Stored procedures
TR Triggers
UF User defined functions

C  Cleanup

Q  Quit
"""


def _next_in_chain(exc: BaseException) -> Optional[BaseException]:
    if exc.__cause__ is not None:
        return exc.__cause__
    # azure-core errors carry the transport failure here
    inner = getattr(exc, "inner_exception", None)
    if isinstance(inner, BaseException):
        return inner
    if exc.__context__ is not None and not exc.__suppress_context__:
        return exc.__context__
    return None


def _single_line(exc: BaseException) -> str:
    message = " ".join(part.strip() for part in str(exc).splitlines() if part.strip())
    return message or type(exc).__name__


def format_error_chain(exc: BaseException) -> str:
    """Join the message of an exception and all its causes, outermost first, one per line."""
    messages: List[str] = []
    seen = set()
    current: Optional[BaseException] = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        message = _single_line(current)
        # azure-core wraps transport errors with the same message
        if not messages or messages[-1] != message:
            messages.append(message)
        current = _next_in_chain(current)
    return "\n".join(messages)


class CommandDispatcher:
    """Interactive menu that runs one demo routine per selection."""

    def __init__(
        self,
        commands: Mapping[str, DemoRoutine],
        client_factory: ClientFactory,
        console: Optional[Console] = None,
    ):
        self.commands = MappingProxyType({code.upper(): routine for code, routine in commands.items()})
        self._client_factory = client_factory
        self.console = console or Console()

    def show_menu(self) -> None:
        self.console.write_line(MENU)

    async def run(self) -> None:
        """Read selections until the quit code (or end of input)."""
        self.show_menu()
        while True:
            self.console.write("Selection: ")
            line = self.console.read_line()
            if line is None:
                break

            code = line.strip().upper()
            routine = self.commands.get(code)
            if routine is not None:
                logger.info(f"Running demo {code}")
                await self.run_demo(routine)
            elif code == QUIT_CODE:
                break
            else:
                self.console.write_line(f"?{line}")

    async def run_demo(self, routine: DemoRoutine) -> None:
        try:
            async with self._client_factory() as client:
                await routine(client)
        except Exception as ex:
            logger.debug("Demo failed", exc_info=True)
            self.console.write_line(f"Error: {format_error_chain(ex)}")

        self.console.write_line()
        self.console.write("Done. Press any key to continue...")
        self.console.pause()
        self.console.write_line()
        self.console.clear()
        self.show_menu()
