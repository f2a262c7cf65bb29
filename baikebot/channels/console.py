"""Terminal session reading replies from stdin."""

import asyncio
import sys
import threading
from typing import TextIO

import typer
from loguru import logger


class ConsoleSession:
    """
    Session bound to the local terminal.

    Replies are read on a daemon thread so a prompt that times out does not
    keep the process alive waiting for a line that never comes.
    """

    def __init__(self, stdin: TextIO | None = None):
        self._stdin = stdin or sys.stdin

    async def send(self, text: str) -> None:
        typer.echo(text)

    async def prompt(self, timeout: float) -> str | None:
        loop = asyncio.get_running_loop()
        future: asyncio.Future[str] = loop.create_future()

        def _deliver(line: str) -> None:
            if not future.done():
                future.set_result(line)

        def _read() -> None:
            try:
                line = self._stdin.readline()
            except (OSError, ValueError) as e:
                logger.debug("stdin read failed: {}", e)
                line = ""
            try:
                loop.call_soon_threadsafe(_deliver, line)
            except RuntimeError:
                # Loop already closed after a timed-out prompt
                pass

        threading.Thread(target=_read, daemon=True).start()
        try:
            line = await asyncio.wait_for(future, timeout=timeout)
        except asyncio.TimeoutError:
            return None
        return line.strip() or None
