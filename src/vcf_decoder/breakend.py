"""Decoding of breakend ALT alleles (VCF 4.3 section 5.4)."""

import re
from dataclasses import dataclass
from typing import Any

from .errors import BreakendError

MATE_BRACKET_PATTERN = re.compile(r"[\[\]]")
ANGLE_BRACKET_START_PATTERN = re.compile(r"<(.*)>(.*)")
ANGLE_BRACKET_END_PATTERN = re.compile(r"(.*)<(.*)>")


@dataclass(frozen=True)
class Breakend:
    """A decoded breakend ALT allele.

    ``join`` is the side of ``replacement`` the novel adjacency attaches to;
    ``mate_direction`` says which way the mate sequence extends from
    ``mate_position``.
    """

    replacement: str
    join: str
    mate_position: str | None = None
    mate_direction: str | None = None
    single_breakend: bool = False

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"Replacement": self.replacement, "Join": self.join}
        if self.mate_position is not None:
            data["MatePosition"] = self.mate_position
        if self.mate_direction is not None:
            data["MateDirection"] = self.mate_direction
        if self.single_breakend:
            data["SingleBreakend"] = True
        return data

    def __str__(self) -> str:
        if self.single_breakend:
            if self.join == "left":
                return f".{self.replacement}"
            return f"{self.replacement}."
        bracket = "[" if self.mate_direction == "right" else "]"
        mate = f"{bracket}{self.mate_position}{bracket}"
        if self.join == "right":
            return f"{self.replacement}{mate}"
        return f"{mate}{self.replacement}"


def _parse_mate_pair(breakend_string: str) -> Breakend:
    mate_direction = "right" if "[" in breakend_string else "left"
    join = None
    replacement = None
    mate_position = None
    for token in MATE_BRACKET_PATTERN.split(breakend_string):
        if not token:
            continue
        if ":" in token:
            mate_position = token
            join = "right" if replacement else "left"
        else:
            replacement = token

    if not (mate_position and join and replacement):
        raise BreakendError(f"Invalid breakend: {breakend_string}")
    return Breakend(
        replacement=replacement,
        join=join,
        mate_position=mate_position,
        mate_direction=mate_direction,
    )


def parse_breakend(breakend_string: str) -> Breakend | None:
    """Decode one ALT allele written in breakend notation.

    Returns None when the allele is not a breakend (plain sequence or a
    symbolic allele such as ``<DEL>``).

    Raises:
        BreakendError: If bracketed mate notation lacks a mate position or
            a replacement sequence.

    Example:
        >>> parse_breakend("G]17:198982]").to_dict()
        {'Replacement': 'G', 'Join': 'right', 'MatePosition': '17:198982', 'MateDirection': 'left'}
    """
    if not breakend_string:
        return None
    first_char = breakend_string[0]
    last_char = breakend_string[-1]

    if first_char in "[]" or last_char in "[]":
        return _parse_mate_pair(breakend_string)

    if first_char == ".":
        return Breakend(replacement=breakend_string[1:], join="left", single_breakend=True)

    if last_char == ".":
        return Breakend(replacement=breakend_string[:-1], join="right", single_breakend=True)

    if first_char == "<":
        match = ANGLE_BRACKET_START_PATTERN.match(breakend_string)
        if not match:
            raise BreakendError(f"Invalid breakend: {breakend_string}")
        contig, replacement = match.groups()
        if not replacement:
            return None
        return Breakend(
            replacement=replacement,
            join="left",
            mate_position=f"<{contig}>:1",
            mate_direction="right",
        )

    if "<" in breakend_string:
        match = ANGLE_BRACKET_END_PATTERN.match(breakend_string)
        if not match:
            raise BreakendError(f"Invalid breakend: {breakend_string}")
        replacement, contig = match.groups()
        if not replacement:
            return None
        return Breakend(
            replacement=replacement,
            join="right",
            mate_position=f"<{contig}>:1",
            mate_direction="right",
        )

    return None
