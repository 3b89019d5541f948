from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from iniview.core.errors import BufferReadError
from iniview.parsers.types import Buffer

logger = logging.getLogger(__name__)


def read_buffer(path: Union[str, Path]) -> Buffer:
    """
    Read a whole file, as bytes, into a Buffer.

    Any failure surfaces as BufferReadError before parsing starts; the
    parser never sees a partial buffer.
    """
    p = Path(path)
    if p.is_dir():
        raise BufferReadError(p, "is a directory")
    try:
        data = p.read_bytes()
    except OSError as e:
        raise BufferReadError(p, e.strerror or str(e)) from e

    logger.debug("read %d byte(s) from %s", len(data), p)
    return Buffer(data, name=str(p))
