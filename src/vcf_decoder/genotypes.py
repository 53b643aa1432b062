"""Fast extraction of the GT sub-field from raw sample columns.

Only GT is pulled out of each sample column; the remaining FORMAT
sub-fields are skipped without being split. The scan strategy is chosen
once per call from the position of GT within FORMAT:

1. FORMAT is exactly ``GT``: each sample column is the genotype.
2. GT is the first key: the genotype ends at the first ``:`` of the column.
3. GT is a later key: skip that many colons inside the column.
"""

from collections.abc import Callable, Iterator, Sequence
from typing import Any

GenotypeCallback = Callable[[str, int, int], Any]


def _gt_ordinal(format_string: str) -> tuple[int, int] | None:
    """Return (index of GT, number of FORMAT keys), or None without GT."""
    if not format_string:
        return None
    keys = format_string.split(":")
    try:
        return keys.index("GT"), len(keys)
    except ValueError:
        return None


def iter_genotype_spans(
    format_string: str, rest: str, n_samples: int
) -> Iterator[tuple[int, int, int]]:
    """Yield ``(sample_index, start, end)`` for each sample's GT slice of ``rest``.

    Samples whose column has fewer sub-fields than GT's position yield
    nothing. Iteration stops early if ``rest`` runs out of columns.
    """
    located = _gt_ordinal(format_string)
    if located is None:
        return
    ordinal, n_keys = located

    rest_len = len(rest)
    pos = 0

    if n_keys == 1:
        for idx in range(n_samples):
            if pos > rest_len:
                return
            end = rest.find("\t", pos)
            if end == -1:
                end = rest_len
            yield idx, pos, end
            pos = end + 1

    elif ordinal == 0:
        for idx in range(n_samples):
            if pos > rest_len:
                return
            tab = rest.find("\t", pos)
            if tab == -1:
                tab = rest_len
            colon = rest.find(":", pos, tab)
            yield idx, pos, tab if colon == -1 else colon
            pos = tab + 1

    else:
        for idx in range(n_samples):
            if pos > rest_len:
                return
            tab = rest.find("\t", pos)
            if tab == -1:
                tab = rest_len
            field_start = pos
            for _ in range(ordinal):
                colon = rest.find(":", field_start, tab)
                if colon == -1:
                    break
                field_start = colon + 1
            else:
                field_end = rest.find(":", field_start, tab)
                yield idx, field_start, tab if field_end == -1 else field_end
            pos = tab + 1


def parse_genotypes_only(
    format_string: str, rest: str, samples: Sequence[str]
) -> dict[str, str]:
    """Map sample name to its raw genotype string (``"0/1"``, ``"1|0"``, ``"."``).

    Args:
        format_string: The FORMAT column, e.g. ``"GT:DP:GQ"``.
        rest: Tab-joined sample columns following FORMAT.
        samples: Sample names in column order.

    Returns:
        Empty dict when FORMAT has no GT key.
    """
    return {
        samples[idx]: rest[start:end]
        for idx, start, end in iter_genotype_spans(format_string, rest, len(samples))
    }


def process_genotypes(
    format_string: str, rest: str, n_samples: int, callback: GenotypeCallback
) -> None:
    """Call ``callback(rest, start, end)`` for each genotype without slicing.

    Useful for counting or hashing genotypes where the substring itself
    is not retained.
    """
    for _idx, start, end in iter_genotype_spans(format_string, rest, n_samples):
        callback(rest, start, end)
