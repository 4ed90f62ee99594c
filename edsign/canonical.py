import json
from typing import Any


def canonicalize(obj: Any) -> bytes:
    """
        Canonical JSON bytes for structured payloads that are about to be signed.
        -sort_keys = True. ensures stable key order
        -separators = (',', ':') removes whitespace variations
        -ensure_ascii = False keeps UTF-8 stable (then encode to UTF-8)
        -allow_nan = False, NaN/Infinity are not JSON and other parsers disagree on them
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(',', ':'),
        ensure_ascii=False,
        allow_nan=False,
    ).encode('utf-8')
