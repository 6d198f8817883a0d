"""
Sources of i3 config text: a local file, a URL or the running i3
"""
import asyncio
import logging
from pathlib import Path

import aiohttp

from i3_config_search.core.config import LoaderConfig
from i3_config_search.core.exceptions import LoadError
from i3_config_search.loader.ipc import I3IpcClient
from i3_config_search.parsing.extractor import ConfigMetadata, parse


logger = logging.getLogger(__name__)


def load_from_file(path: str) -> str:
    """Read a config from disk"""
    try:
        return Path(path).expanduser().read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Cannot read config file {path}: {e}") from e


async def load_from_url(url: str, timeout: float = 10.0) -> str:
    """
    Download a config

    Args:
        url: Location of the config text
        timeout: Total request timeout in seconds

    Returns:
        The response body

    Raises:
        LoadError: on a non-200 response, a client error or an
            undecodable body
    """
    logger.info(f"Fetching config from {url}")
    try:
        async with aiohttp.ClientSession() as session:
            async with session.get(
                url,
                timeout=aiohttp.ClientTimeout(total=timeout)
            ) as response:
                if response.status != 200:
                    raise LoadError(f"Fetching {url} failed with status {response.status}")
                return await response.text()
    except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError) as e:
        raise LoadError(f"Fetching {url} failed: {e}") from e


async def load_text(config: LoaderConfig) -> str:
    """Fetch config text from the source named in ``config``"""
    if config.source == "file":
        if not config.path:
            raise LoadError("No config file path given")
        return load_from_file(config.path)

    if config.source == "url":
        if not config.url:
            raise LoadError("No config URL given")
        return await load_from_url(config.url, config.timeout)

    client = I3IpcClient(config.socket_path, config.timeout)
    return await client.get_config()


async def load_metadata(config: LoaderConfig) -> ConfigMetadata:
    """Fetch and parse config text from the source named in ``config``"""
    text = await load_text(config)
    metadata = parse(text)
    logger.info(f"Loaded {len(metadata)} entries from {config.source}")
    return metadata
