from __future__ import annotations

from pathlib import Path

import pytest

from iniview import Buffer, BufferReadError, IniParseError, ParseErrorKind, run_parse
from iniview.core.models import ParseConfig
from iniview.core.reader import read_buffer


def test_read_buffer(write_ini) -> None:
    path = write_ini("a.ini", b"[s]\r\nk=v\r\n")
    buf = read_buffer(path)
    assert buf.data == b"[s]\r\nk=v\r\n"
    assert buf.name == str(path)


def test_read_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.ini"
    with pytest.raises(BufferReadError) as exc:
        read_buffer(missing)
    assert exc.value.path == str(missing)
    assert isinstance(exc.value.__cause__, OSError)
    assert str(exc.value).startswith(f"Unable to read {missing}")


def test_read_directory(tmp_path: Path) -> None:
    with pytest.raises(BufferReadError) as exc:
        read_buffer(tmp_path)
    assert exc.value.reason == "is a directory"


def test_run_parse_from_path(write_ini) -> None:
    path = write_ini("a.ini", b"[s]\nk = v\n")
    outcome = run_parse(path)
    assert len(outcome) == 1
    assert [r.as_text() for r in outcome] == [("s", "k", "v")]
    assert outcome.records[0].key.buffer is outcome.buffer
    assert outcome.duration_ms >= 0


def test_run_parse_from_buffer() -> None:
    buf = Buffer(b"k=v")
    outcome = run_parse(buf)
    assert outcome.buffer is buf


def test_run_parse_empty_file(write_ini) -> None:
    path = write_ini("empty.ini", b"")
    assert run_parse(path).records == []
    with pytest.raises(IniParseError) as exc:
        run_parse(path, ParseConfig(empty_input="error"))
    assert exc.value.kind is ParseErrorKind.EMPTY_INPUT


def test_run_parse_propagates_syntax_errors(write_ini) -> None:
    path = write_ini("bad.ini", b"a=1\n[open\n")
    with pytest.raises(IniParseError) as exc:
        run_parse(path)
    assert exc.value.line == 2


def test_parse_does_not_depend_on_display_encoding(write_ini) -> None:
    path = write_ini("a.ini", "k = é\n".encode("utf-8"))
    utf8 = run_parse(path)
    latin = run_parse(path, ParseConfig(encoding="latin-1"))
    assert [(r.key.start, r.value.start, r.value.length) for r in utf8] == [
        (r.key.start, r.value.start, r.value.length) for r in latin
    ]
