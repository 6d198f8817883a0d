"""
i3 IPC client, just enough to fetch the loaded config
"""
import asyncio
import contextlib
import logging
from typing import Optional

from i3ipc.aio import Connection

from i3_config_search.core.exceptions import LoadError


class I3IpcClient:
    """
    Talks to a running i3 over its IPC socket

    Without a socket path, i3ipc finds the socket from $I3SOCK or by
    asking the i3 binary.
    """

    def __init__(self, socket_path: Optional[str] = None, timeout: float = 10.0):
        self.socket_path = socket_path
        self.timeout = timeout
        self.logger = logging.getLogger("I3IpcClient")

    async def connect(self) -> Connection:
        self.logger.debug(f"Connecting to i3 at {self.socket_path or 'default socket'}")
        try:
            return await asyncio.wait_for(
                Connection(socket_path=self.socket_path, auto_reconnect=False).connect(),
                self.timeout
            )
        except Exception as e:
            raise LoadError(f"Cannot connect to i3: {e}") from e

    async def get_config(self) -> str:
        """Text of the config i3 last loaded"""
        connection = await self.connect()
        try:
            reply = await asyncio.wait_for(connection.get_config(), self.timeout)
        except Exception as e:
            raise LoadError(f"i3 GET_CONFIG request failed: {e}") from e
        finally:
            with contextlib.suppress(OSError):
                connection.main_quit()

        config = getattr(reply, "config", None)
        if not isinstance(config, str):
            raise LoadError("Invalid GET_CONFIG reply from i3: no config text")
        return config
