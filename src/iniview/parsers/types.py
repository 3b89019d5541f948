from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

BufferSource = Union[bytes, bytearray, memoryview, str]


class Buffer:
    """
    Immutable byte storage that parsed views point into.

    Views hold a reference to their Buffer, so the bytes stay alive for as
    long as any record produced from them is in use.
    """

    __slots__ = ("_data", "name")

    def __init__(self, data: BufferSource, *, encoding: str = "utf-8", name: str = "<memory>") -> None:
        if isinstance(data, str):
            data = data.encode(encoding)
        self._data = bytes(data)
        self.name = name

    @property
    def data(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def view(self, start: int, length: int) -> "View":
        return View(self, start, length)

    def empty_view(self) -> "View":
        return View(self, 0, 0)

    def __repr__(self) -> str:
        return f"Buffer(name={self.name!r}, length={len(self._data)})"


@dataclass(frozen=True)
class View:
    """ A non-owning (offset, length) slice of a Buffer."""
    buffer: Buffer
    start: int
    length: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.length < 0:
            raise ValueError(f"negative view bounds: start={self.start}, length={self.length}")
        if self.start + self.length > len(self.buffer):
            raise ValueError(
                f"view [{self.start}:{self.start + self.length}] exceeds buffer length {len(self.buffer)}"
            )

    @property
    def end(self) -> int:
        return self.start + self.length

    def __len__(self) -> int:
        return self.length

    def memory(self) -> memoryview:
        return memoryview(self.buffer.data)[self.start:self.end]

    def tobytes(self) -> bytes:
        return self.buffer.data[self.start:self.end]

    def decode(self, encoding: str = "utf-8", errors: str = "strict") -> str:
        return self.tobytes().decode(encoding, errors)

    def __str__(self) -> str:
        return self.decode(errors="replace")


@dataclass(frozen=True)
class Record:
    """ One section/key/value entry, in source order."""
    section: View
    key: View
    value: View
    line: int

    def as_text(self, encoding: str = "utf-8", errors: str = "replace") -> Tuple[str, str, str]:
        return (
            self.section.decode(encoding, errors),
            self.key.decode(encoding, errors),
            self.value.decode(encoding, errors),
        )
