from __future__ import annotations

import json
from pathlib import Path

import yaml
from typer.testing import CliRunner

from iniview import __version__
from iniview.cli.app import app

runner = CliRunner()

SAMPLE = b"; demo\n[s]\na = 1\nb=two words\n"


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"iniview {__version__}" in result.output


def test_show_plain(write_ini) -> None:
    path = write_ini("a.ini", SAMPLE)
    result = runner.invoke(app, ["show", str(path)])
    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ["[s] a = 1", "[s] b = two words"]


def test_show_with_lines(write_ini) -> None:
    path = write_ini("a.ini", SAMPLE)
    result = runner.invoke(app, ["show", str(path), "--lines"])
    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == ["3: [s] a = 1", "4: [s] b = two words"]


def test_show_json(write_ini) -> None:
    path = write_ini("a.ini", SAMPLE.replace(b"\n", b"\r\n"))
    result = runner.invoke(app, ["show", str(path), "--format", "json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == [
        {"section": "s", "key": "a", "value": "1"},
        {"section": "s", "key": "b", "value": "two words"},
    ]


def test_show_yaml_with_lines(write_ini) -> None:
    path = write_ini("a.ini", SAMPLE)
    result = runner.invoke(app, ["show", str(path), "-f", "yaml", "--lines"])
    assert result.exit_code == 0, result.output
    rows = yaml.safe_load(result.stdout)
    assert rows[1] == {"section": "s", "key": "b", "value": "two words", "line": 4}


def test_show_table(write_ini) -> None:
    path = write_ini("a.ini", SAMPLE)
    result = runner.invoke(app, ["show", str(path), "--format", "table"])
    assert result.exit_code == 0, result.output
    assert "two words" in result.stdout


def test_show_uses_repo_config(write_ini, tmp_path: Path) -> None:
    (tmp_path / ".iniview.toml").write_text('[output]\nformat = "json"\n', encoding="utf-8")
    path = write_ini("conf/a.ini", SAMPLE)
    result = runner.invoke(app, ["show", str(path)])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)[0]["key"] == "a"


def test_show_parse_error_prints_no_records(write_ini) -> None:
    path = write_ini("bad.ini", b"a=1\nb=2\nbroken\n")
    result = runner.invoke(app, ["show", str(path)])
    assert result.exit_code == 1
    assert "[line 3] Expected '=', found end of line" in result.output
    assert "broken" in result.output
    assert "a = 1" not in result.output


def test_show_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["show", str(tmp_path / "nope.ini")])
    assert result.exit_code == 2
    assert "Unable to read" in result.output


def test_empty_file_policy(write_ini) -> None:
    path = write_ini("empty.ini", b"")
    ok = runner.invoke(app, ["show", str(path)])
    assert ok.exit_code == 0
    assert ok.stdout == ""

    strict = runner.invoke(app, ["check", str(path), "--empty-error"])
    assert strict.exit_code == 1
    assert "[line 1]" in strict.output


def test_check(write_ini) -> None:
    path = write_ini("a.ini", b"top=1\n[s]\na=1\n[t]\nb=2\n")
    result = runner.invoke(app, ["check", str(path)])
    assert result.exit_code == 0, result.output
    assert "OK: 3 record(s) in 3 section(s)" in result.output


def test_check_reports_unterminated_section(write_ini) -> None:
    path = write_ini("bad.ini", b"[abc\n")
    result = runner.invoke(app, ["check", str(path)])
    assert result.exit_code == 1
    assert "[line 1] Expected ']', found end of file" in result.output


def test_get(write_ini) -> None:
    path = write_ini("a.ini", b"name=top\n[db]\nHost = db.local\n[web]\nhost = web.local\n")
    assert runner.invoke(app, ["get", str(path), "name"]).stdout.strip() == "top"

    result = runner.invoke(app, ["get", str(path), "host", "--section", "web"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "web.local"

    result = runner.invoke(app, ["get", str(path), "HOST", "-s", "DB", "-i"])
    assert result.stdout.strip() == "db.local"


def test_get_missing_key(write_ini) -> None:
    path = write_ini("a.ini", b"a=1\n")
    result = runner.invoke(app, ["get", str(path), "b"])
    assert result.exit_code == 2
    assert "Key not found: b" in result.output


def test_init(tmp_path: Path) -> None:
    result = runner.invoke(app, ["init", str(tmp_path)])
    assert result.exit_code == 0
    cfg = tmp_path / ".iniview.toml"
    assert cfg.is_file()
    assert 'empty_input = "records"' in cfg.read_text(encoding="utf-8")

    cfg.write_text("# mine\n", encoding="utf-8")
    again = runner.invoke(app, ["init", str(tmp_path)])
    assert "not overwritten" in again.output
    assert cfg.read_text(encoding="utf-8") == "# mine\n"

    forced = runner.invoke(app, ["init", str(tmp_path), "--force"])
    assert forced.exit_code == 0
    assert "[parse]" in cfg.read_text(encoding="utf-8")


def test_strict_decoding_failure_prints_no_records(write_ini, tmp_path: Path) -> None:
    (tmp_path / ".iniview.toml").write_text('[parse]\ndecode_errors = "strict"\n', encoding="utf-8")
    path = write_ini("a.ini", b"good=1\nk=\xff\xfe\n")
    for command in (["show", str(path)], ["get", str(path), "k"]):
        result = runner.invoke(app, command)
        assert result.exit_code == 2
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "[line 2] cannot decode as utf-8" in result.output
        assert "good = 1" not in result.output


def test_bad_encoding_option_is_a_config_error(write_ini) -> None:
    path = write_ini("a.ini", SAMPLE)
    result = runner.invoke(app, ["show", str(path), "--encoding", "nope"])
    assert result.exit_code == 2
    assert isinstance(result.exception, SystemExit)
    assert "error: config: parse.encoding" in result.output
    assert "Traceback" not in result.output


def test_malformed_config_file(write_ini, tmp_path: Path) -> None:
    (tmp_path / ".iniview.toml").write_text("[output\n", encoding="utf-8")
    path = write_ini("a.ini", SAMPLE)
    result = runner.invoke(app, ["check", str(path)])
    assert result.exit_code == 2
    assert "error: config:" in result.output
