"""Line-level VCF record decoding."""

import logging
import re
from typing import Any
from urllib.parse import unquote

from .breakend import parse_breakend
from .config import ParserConfig
from .errors import RecordError
from .header import VCFHeader, get_array_size
from .models import NUMERIC_TYPES, Variant, to_number

logger = logging.getLogger(__name__)

MALFORMED_ESCAPE_PATTERN = re.compile(r"%(?![0-9A-Fa-f]{2})")


def percent_decode(value: str) -> str:
    """Decode %XX escapes, returning ``value`` unchanged if any escape is malformed."""
    if MALFORMED_ESCAPE_PATTERN.search(value):
        return value
    try:
        return unquote(value, errors="strict")
    except UnicodeDecodeError:
        return value


class VCFParser:
    """Decode VCF data lines against a parsed header.

    The parser holds only read-only state after construction, so one
    instance can decode lines from several threads.

    Args:
        header: The full header text (all ``#`` lines).
        strict: Require an INFO column and valid POS/QUAL on every line,
            and reject a FORMAT column without samples in the header.
        decode_breakends: Decode ALT alleles of ``SVTYPE=BND`` records
            into :class:`~vcf_decoder.breakend.Breakend` values.

    Example:
        >>> parser = VCFParser(header_text)
        >>> variant = parser.parse_line(line)
        >>> variant.genotypes()
        {'NA00001': '0|0', 'NA00002': '1|0'}
    """

    def __init__(self, header: str, strict: bool = True, decode_breakends: bool = True):
        self.strict = strict
        self.decode_breakends = decode_breakends
        self.header = VCFHeader(header, strict=strict)
        self.samples: list[str] = self.header.samples
        self._info_types = self.header.field_types("INFO")
        self._format_types = self.header.field_types("FORMAT")

    @classmethod
    def from_config(cls, header: str, config: ParserConfig) -> "VCFParser":
        return cls(header, strict=config.strict, decode_breakends=config.decode_breakends)

    @property
    def metadata(self) -> dict[str, Any]:
        return self.header.metadata

    def get_metadata(self, *path: str) -> Any:
        """See :meth:`VCFHeader.get_metadata`."""
        return self.header.get_metadata(*path)

    def field_cardinality(
        self, category: str, field_id: str, n_alts: int, ploidy: int = 2
    ) -> int | None:
        """Expected value count for a declared field, -1 if variable, None if undeclared."""
        attrs = self.get_metadata(category, field_id)
        if not isinstance(attrs, dict):
            return None
        return get_array_size(attrs.get("Number"), n_alts, ploidy)

    def parse_line(self, line: str) -> Variant | None:
        """Decode one data line; returns None for a blank line.

        Raises:
            RecordError: In strict mode, if INFO is missing or POS/QUAL
                are not numeric.
            BreakendError: If a breakend ALT allele cannot be decoded.
        """
        # tabs are kept so empty trailing sample columns survive
        line = line.rstrip(" \r\n")
        if not line.strip():
            return None

        # maxsplit keeps all sample columns in one unsplit tail
        fields = line.split("\t", 9)
        rest = fields[9] if len(fields) > 9 else ""
        fields = fields[:9] + [None] * (9 - min(len(fields), 9))
        chrom, pos, ids, ref, alt, qual, filters, info, format_ = fields

        if self.strict and not info:
            raise RecordError(
                "no INFO field specified, must contain at least a '.' "
                "(turn off strict mode to allow)"
            )

        decoded_info = {} if not info or info == "." else self._parse_info(info)
        decoded_filter = None if filters is None or filters == "." else filters.split(";")
        if decoded_filter == ["PASS"]:
            decoded_filter = "PASS"

        return Variant(
            chrom=chrom,
            pos=self._parse_pos(pos),
            id=None if ids is None or ids == "." else ids.split(";"),
            ref=ref,
            alt=self._parse_alt(alt, decoded_info),
            qual=self._parse_qual(qual),
            filter=decoded_filter,
            info=decoded_info,
            format=format_,
            _rest=rest,
            _format_types=self._format_types,
            _sample_names=self.samples,
        )

    def _parse_pos(self, pos: str | None) -> int | None:
        if pos is None:
            return None
        try:
            return int(pos)
        except ValueError:
            if self.strict:
                raise RecordError(f"POS is not an integer: {pos!r}") from None
            return None

    def _parse_qual(self, qual: str | None) -> float | None:
        if qual is None or qual == ".":
            return None
        try:
            return float(qual)
        except ValueError:
            if self.strict:
                raise RecordError(f"QUAL is not numeric: {qual!r}") from None
            return None

    def _parse_alt(self, alt: str | None, info: dict[str, Any]) -> list | None:
        if alt is None or alt == ".":
            return None
        alleles = alt.split(",")
        if self.decode_breakends and info.get("SVTYPE") == ["BND"]:
            return [parse_breakend(allele) or allele for allele in alleles]
        return alleles

    def _parse_info(self, info_str: str) -> dict[str, Any]:
        result: dict[str, Any] = {}
        has_escape = "%" in info_str

        for pair in info_str.split(";"):
            if not pair:
                continue
            key, _sep, value = pair.partition("=")
            item_type = self._info_types.get(key)

            if not value:
                result[key] = True
                continue
            if item_type == "Flag":
                logger.warning(
                    "Info field %s is a Flag and should not have a value (got value %s)",
                    key,
                    value,
                )

            is_numeric = item_type in NUMERIC_TYPES
            items: list[Any] = []
            for item in value.split(","):
                if item == ".":
                    items.append(None)
                    continue
                if has_escape:
                    item = percent_decode(item)
                items.append(to_number(item) if is_numeric else item)
            result[key] = items

        return result
