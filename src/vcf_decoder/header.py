"""VCF header parsing and the metadata catalog."""

import copy
import logging
import re
from math import comb, isfinite
from typing import Any

from .errors import HeaderError
from .meta_string import parse_meta_string
from .models import FLOAT_PATTERN, INTEGER_PATTERN
from .reserved import RESERVED_CATEGORIES

logger = logging.getLogger(__name__)

MANDATORY_COLUMNS = ["#CHROM", "POS", "ID", "REF", "ALT", "QUAL", "FILTER", "INFO"]

METADATA_LINE_PATTERN = re.compile(r"^##(.+?)=(.*)$")


def get_array_size(number_spec: Any, n_alts: int, ploidy: int = 2) -> int:
    """Calculate expected array size for INFO/FORMAT fields.

    Returns -1 for variable-length fields.
    """
    if number_spec == "A":
        return n_alts
    if number_spec == "R":
        return n_alts + 1
    if number_spec == "G":
        return comb(n_alts + ploidy, ploidy)
    if number_spec is None or number_spec == ".":
        return -1
    try:
        return int(number_spec)
    except (TypeError, ValueError):
        return 1


def coerce_number(value: Any) -> Any:
    """Convert a ``Number`` attribute to int/float when it is numeric."""
    if not isinstance(value, str):
        return value
    if INTEGER_PATTERN.fullmatch(value):
        return int(value)
    if FLOAT_PATTERN.fullmatch(value):
        number = float(value)
        if isfinite(number):
            return number
    return value


class VCFHeader:
    """Parsed VCF header: metadata catalog plus the ordered sample names.

    The catalog maps a category (``INFO``, ``FORMAT``, ``contig``...) to
    either a dict keyed by declared ID or a plain string for simple
    ``##key=value`` lines. Reserved definitions are loaded first and
    header declarations with the same ID shadow them.

    Args:
        header: Header text, LF or CRLF separated.
        strict: Reject a column line that has FORMAT but no samples.

    Raises:
        HeaderError: If the header is empty or the column line is missing
            or malformed.
    """

    def __init__(self, header: str, strict: bool = True):
        if not header:
            raise HeaderError("empty header received")
        header_lines = [line for line in re.split(r"[\r\n]+", header) if line.strip()]
        if not header_lines:
            raise HeaderError("no non-empty header lines specified")

        self.strict = strict
        self.metadata: dict[str, Any] = copy.deepcopy(RESERVED_CATEGORIES)
        self._id_categories: set[str] = set(RESERVED_CATEGORIES)

        column_line = None
        for line in header_lines:
            if not line.startswith("#"):
                raise HeaderError(f"Bad line in header:\n{line}")
            if line.startswith("##"):
                self._parse_metadata(line)
            else:
                column_line = line

        if column_line is None:
            raise HeaderError("No format line found in header")

        self.samples: list[str] = self._parse_column_line(column_line)
        logger.debug(
            "Parsed VCF header: %d samples, categories %s",
            len(self.samples),
            sorted(self.metadata),
        )

    def _parse_column_line(self, line: str) -> list[str]:
        fields = line.strip().split("\t")
        if len(fields) < 8:
            raise HeaderError(f"VCF header missing columns:\n{line}")
        if fields[:8] != MANDATORY_COLUMNS:
            raise HeaderError(f"VCF column headers not correct:\n{line}")
        if self.strict and len(fields) == 9:
            raise HeaderError(f"VCF header has FORMAT but no samples:\n{line}")
        return fields[9:]

    def _parse_metadata(self, line: str) -> None:
        match = METADATA_LINE_PATTERN.match(line.strip())
        if not match:
            raise HeaderError(f"Line is not a valid metadata line: {line}")
        meta_key, meta_val = match.groups()

        if not meta_val.startswith("<"):
            self._set_untyped(meta_key, meta_val, line)
            return

        key_vals = parse_meta_string(meta_val)
        if "Number" in key_vals:
            key_vals["Number"] = coerce_number(key_vals["Number"])

        field_id = key_vals.pop("ID", None)
        if field_id is None:
            self._set_untyped(meta_key, key_vals, line)
            return

        if meta_key not in self._id_categories:
            self.metadata[meta_key] = {}
            self._id_categories.add(meta_key)
        self.metadata[meta_key][field_id] = key_vals

    def _set_untyped(self, meta_key: str, value: Any, line: str) -> None:
        """Store a line without ``ID``; ID-keyed categories are never replaced."""
        if meta_key in self._id_categories:
            logger.warning("Ignoring %s header line without ID: %s", meta_key, line.strip())
            return
        self.metadata[meta_key] = value

    def get_metadata(self, *path: str) -> Any:
        """Walk the catalog by successive keys.

        ``get_metadata()`` returns the whole catalog, ``get_metadata("INFO", "DP",
        "Type")`` a single attribute. Returns None as soon as a step is missing.
        """
        node: Any = self.metadata
        for key in path:
            if not isinstance(node, dict):
                return None
            node = node.get(key)
            if node is None:
                return None
        return node

    def field_types(self, category: str) -> dict[str, str | None]:
        """Map each declared ID in ``category`` to its ``Type`` attribute."""
        entries = self.metadata.get(category)
        if not isinstance(entries, dict):
            return {}
        return {
            field_id: attrs.get("Type") if isinstance(attrs, dict) else None
            for field_id, attrs in entries.items()
        }
