"""JSON encoder/decoder for the persisted entry document:

{
  "<service>": {"username": "<username>", "password": "<password>"},
  ...
}

Keys are sorted and the document is pretty-printed so that
decode -> encode reproduces the file byte for byte.
"""
from __future__ import annotations

import json
from typing import Dict, Mapping

from credstore.entry import Entry

FIELD_USERNAME = "username"
FIELD_PASSWORD = "password"


def encode_entries(entries: Mapping[str, Entry]) -> str:
    """Encode a service -> Entry mapping as the JSON document text."""
    doc: Dict[str, Dict[str, str]] = {}
    for service, entry in entries.items():
        doc[service] = {
            FIELD_USERNAME: entry.username,
            FIELD_PASSWORD: entry.password,
        }
    return json.dumps(doc, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def decode_entries(text: str) -> Dict[str, Entry]:
    """Decode the JSON document text into a service -> Entry mapping.

    Empty or whitespace-only text is an empty store. Anything else that is not
    an object of ``{"username": str, "password": str}`` objects raises
    ValueError (json.JSONDecodeError is a ValueError subclass).
    """
    if not text.strip():
        return {}

    parsed = json.loads(text)
    if not isinstance(parsed, dict):
        raise ValueError(f"Expected a JSON object at top level, got {type(parsed).__name__}")

    result: Dict[str, Entry] = {}
    for service, record in parsed.items():
        if not isinstance(record, dict):
            raise ValueError(f"Record for service {service!r} is not an object")
        username = record.get(FIELD_USERNAME)
        password = record.get(FIELD_PASSWORD)
        if not isinstance(username, str):
            raise ValueError(f"Record for service {service!r} has no string '{FIELD_USERNAME}'")
        if not isinstance(password, str):
            raise ValueError(f"Record for service {service!r} has no string '{FIELD_PASSWORD}'")
        result[service] = Entry(service, username, password)

    return result
