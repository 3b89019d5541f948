from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from iniview.parsers.types import Record

# section -> key -> value
RecordIndex = Dict[str, Dict[str, str]]


def format_record(record: Record, *, encoding: str = "utf-8", errors: str = "replace") -> str:
    section, key, value = record.as_text(encoding, errors)
    return f"[{section}] {key} = {value}"


def records_to_dicts(
    records: Iterable[Record],
    *,
    encoding: str = "utf-8",
    errors: str = "replace",
    with_lines: bool = False,
) -> List[Dict[str, object]]:
    """
    Plain-data rendition of records, in source order (for JSON/YAML output).
    """
    out: List[Dict[str, object]] = []
    for r in records:
        section, key, value = r.as_text(encoding, errors)
        row: Dict[str, object] = {"section": section, "key": key, "value": value}
        if with_lines:
            row["line"] = r.line
        out.append(row)
    return out


def normalize_key(key: str, *, case_insensitive: bool) -> str:
    k = (key or "").strip()
    return k.lower() if case_insensitive else k


def build_index(
    records: Iterable[Record],
    *,
    case_insensitive: bool = False,
    encoding: str = "utf-8",
    errors: str = "replace",
) -> RecordIndex:
    """
    Index records by section then key.

    Records without a section header land under "". Later duplicates
    overwrite earlier ones (the record list itself keeps every occurrence).
    """
    index: RecordIndex = {}
    for r in records:
        section, key, value = r.as_text(encoding, errors)
        section = normalize_key(section, case_insensitive=case_insensitive)
        key = normalize_key(key, case_insensitive=case_insensitive)
        index.setdefault(section, {})[key] = value
    return index


def lookup(
    index: RecordIndex,
    key: str,
    *,
    section: Optional[str] = None,
    case_insensitive: bool = False,
) -> Optional[str]:
    """
    Find a value by key. Without a section, the global ("") section wins,
    then sections are searched in order of first appearance.
    """
    k = normalize_key(key, case_insensitive=case_insensitive)
    if section is not None:
        s = normalize_key(section, case_insensitive=case_insensitive)
        return index.get(s, {}).get(k)

    if k in index.get("", {}):
        return index[""][k]
    for values in index.values():
        if k in values:
            return values[k]
    return None
