"""Reading CSV sources into text.

The read is the single suspension point of an import: everything after it is
synchronous string processing. Sources are file-like objects exposing
``read()``; coroutine readers (e.g. upload wrappers in async web frameworks)
are awaited directly, blocking readers are run in a worker thread.
"""

import asyncio
import inspect
from typing import Any, Dict, List

from mobility_import.logging import get_logger

from .csv_tokenizer import parse_csv_text
from .exceptions import SourceReadError

logger = get_logger(__name__, component="parsing")

ENCODING = "utf-8"


async def read_source(source: Any) -> str:
    """Read a file-like source in full and decode it as UTF-8 text.

    Undecodable bytes are replaced rather than rejected; malformed content
    is the tokenizer's problem, not a read failure.

    Args:
        source: Object with a sync or async ``read()`` returning bytes or str

    Returns:
        Decoded text

    Raises:
        SourceReadError: If the source has no ``read()`` or reading fails
    """
    source_name = str(getattr(source, "name", "") or "")

    read = getattr(source, "read", None)
    if not callable(read):
        raise SourceReadError("Failed to read file: source is not readable", source_name)

    try:
        if inspect.iscoroutinefunction(read):
            payload = await read()
        else:
            payload = await asyncio.to_thread(read)
    except Exception as e:
        logger.warning(
            f"Failed to read CSV source: {e}",
            extra={
                "event": "parsing.source.read_failed",
                "source_name": source_name,
                "error_type": type(e).__name__,
            },
        )
        raise SourceReadError(f"Failed to read file: {e}", source_name) from e

    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload).decode(ENCODING, errors="replace")
    if isinstance(payload, str):
        return payload

    raise SourceReadError(
        f"Failed to read file: unexpected payload type {type(payload).__name__}",
        source_name,
    )


async def parse_csv_source(source: Any) -> List[Dict[str, str]]:
    """Read a source and tokenize it into header-keyed records.

    Raises:
        SourceReadError: If the source cannot be read
    """
    text = await read_source(source)
    return parse_csv_text(text)
