"""Tokenizer for structured header values such as ``<ID=DP,Number=1,...>``."""

from typing import Any


def split_meta_fields(field_string: str) -> list[str]:
    """Split on commas that are not inside double quotes or square brackets.

    ``'ID=DB,Description="dbSNP, build 129",Values=[A, B]'`` yields three
    fragments. Fragments are whitespace-trimmed.
    """
    parts = []
    current_part = []
    in_quotes = False
    in_brackets = False

    for char in field_string:
        if char == '"':
            in_quotes = not in_quotes
            current_part.append(char)
        elif char == "[" and not in_quotes:
            in_brackets = True
            current_part.append(char)
        elif char == "]" and not in_quotes:
            in_brackets = False
            current_part.append(char)
        elif char == "," and not in_quotes and not in_brackets:
            parts.append("".join(current_part).strip())
            current_part = []
        else:
            current_part.append(char)

    if current_part:
        parts.append("".join(current_part).strip())

    return parts


def _decode_value(value: str) -> str | list[str]:
    if len(value) >= 2 and value.startswith("[") and value.endswith("]"):
        return [item.strip() for item in value[1:-1].split(",")]
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value.strip('"')


def parse_meta_string(meta_string: str) -> dict[str, Any]:
    """Parse a bracketed header value into a dict.

    Values wrapped in ``[...]`` become lists, quoted values lose their
    quotes and everything else is returned as the raw string. Numeric
    coercion is left to the caller. A fragment without ``=`` maps to
    ``None``; malformed input never raises.

    Example:
        >>> parse_meta_string('<ID=DB,Number=0,Type=Flag,Description="dbSNP membership, build 129">')
        {'ID': 'DB', 'Number': '0', 'Type': 'Flag', 'Description': 'dbSNP membership, build 129'}
    """
    inside = meta_string.strip()
    if inside.startswith("<"):
        inside = inside[1:]
    if inside.endswith(">"):
        inside = inside[:-1]

    result: dict[str, Any] = {}
    for fragment in split_meta_fields(inside):
        if not fragment:
            continue
        key, sep, value = fragment.partition("=")
        result[key.strip()] = _decode_value(value) if sep else None

    return result
