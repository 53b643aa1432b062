"""Data model for decoded VCF records."""

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .breakend import Breakend
from .genotypes import GenotypeCallback, parse_genotypes_only, process_genotypes

logger = logging.getLogger(__name__)

NUMERIC_TYPES = frozenset({"Integer", "Float"})

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def to_number(value: str) -> int | float | str:
    """Convert a data value to int or float, keeping the string if neither parses.

    Only plain ASCII notation is accepted: digit separators, padding
    whitespace and non-ASCII digits leave the value a string.
    """
    if INTEGER_PATTERN.fullmatch(value):
        return int(value)
    if FLOAT_PATTERN.fullmatch(value):
        return float(value)
    logger.debug("Value %r declared numeric but could not be converted", value)
    return value


@dataclass
class Variant:
    """One decoded VCF data line.

    The fixed columns are decoded eagerly. Sample columns are kept as the
    raw tab-joined text and decoded only when ``samples()`` or
    ``genotypes()`` is called; both are pure and may be called repeatedly.
    """

    chrom: str
    pos: int | None
    id: list[str] | None
    ref: str | None
    alt: list[str | Breakend] | None
    qual: float | None
    filter: str | list[str] | None
    info: dict[str, Any]
    format: str | None = None

    _rest: str = field(default="", repr=False)
    _format_types: Mapping[str, str | None] = field(
        default_factory=dict, repr=False, compare=False
    )
    _sample_names: Sequence[str] = field(default_factory=list, repr=False, compare=False)

    def samples(self) -> dict[str, dict[str, list[Any] | None]]:
        """Decode every FORMAT sub-field of every sample.

        Returns a dict of sample name to ``{format_key: values}``. A missing
        (``.`` or empty) sub-field is None; otherwise the comma-split values
        with ``.`` elements as None and Integer/Float keys converted.
        """
        decoded: dict[str, dict[str, list[Any] | None]] = {}
        if not self.format:
            return decoded

        format_keys = self.format.split(":")
        numeric = [self._format_types.get(key) in NUMERIC_TYPES for key in format_keys]

        for sample, column in zip(self._sample_names, self._rest.split("\t")):
            sample_data: dict[str, list[Any] | None] = {}
            for key, is_numeric, value in zip(format_keys, numeric, column.split(":")):
                if value == "" or value == ".":
                    sample_data[key] = None
                elif is_numeric:
                    sample_data[key] = [
                        None if item == "." else to_number(item) for item in value.split(",")
                    ]
                else:
                    sample_data[key] = [None if item == "." else item for item in value.split(",")]
            decoded[sample] = sample_data

        return decoded

    def genotypes(self) -> dict[str, str]:
        """Map sample name to raw GT string; empty when FORMAT has no GT."""
        return parse_genotypes_only(self.format or "", self._rest, self._sample_names)

    def process_genotypes(self, callback: GenotypeCallback) -> None:
        """Call ``callback(text, start, end)`` for each sample's GT span."""
        process_genotypes(self.format or "", self._rest, len(self._sample_names), callback)

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe projection of the fixed columns."""
        alt = None
        if self.alt is not None:
            alt = [a.to_dict() if isinstance(a, Breakend) else a for a in self.alt]
        return {
            "CHROM": self.chrom,
            "POS": self.pos,
            "ID": self.id,
            "REF": self.ref,
            "ALT": alt,
            "QUAL": self.qual,
            "FILTER": self.filter,
            "INFO": self.info,
            "FORMAT": self.format,
        }
