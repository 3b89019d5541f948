from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Union

from iniview.core.models import ParseConfig
from iniview.core.reader import read_buffer
from iniview.parsers.ini_parser import IniParser
from iniview.parsers.types import Buffer, Record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseOutcome:
    """
    A buffer together with the records parsed from it.

    Holding both keeps every record view backed by live storage.
    """
    buffer: Buffer
    records: List[Record]
    duration_ms: int

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self.records)


def run_parse(
    source: Union[str, Path, Buffer],
    config: Optional[ParseConfig] = None,
) -> ParseOutcome:
    """
    Orchestrate a parse:
    acquire buffer -> scan -> ParseOutcome.

    Raises BufferReadError or IniParseError; nothing partial is returned.
    """
    config = config or ParseConfig()
    buffer = source if isinstance(source, Buffer) else read_buffer(source)

    t0 = time.perf_counter()
    records = IniParser(buffer, allow_empty=config.allow_empty).parse()
    duration_ms = int((time.perf_counter() - t0) * 1000)

    logger.debug("parsed %s in %d ms", buffer.name, duration_ms)
    return ParseOutcome(buffer=buffer, records=records, duration_ms=duration_ms)
