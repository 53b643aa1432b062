"""Split a VCF file into its header text and data lines."""

import gzip
from collections.abc import Generator
from pathlib import Path
from typing import TextIO


def open_vcf(path: Path) -> TextIO:
    """Open a plain or gzip/bgzip-compressed VCF for text reading."""
    if path.suffix in (".gz", ".bgz"):
        return gzip.open(path, "rt")
    return open(path, "rt")


def read_vcf(path: Path) -> tuple[str, Generator[str, None, None]]:
    """Return the header text and an iterator over the remaining data lines.

    The file stays open until the line generator is exhausted or closed.
    """
    fh = open_vcf(path)
    header_lines = []
    first_data_line = None
    for line in fh:
        if line.startswith("#"):
            header_lines.append(line)
        elif line.strip():
            first_data_line = line
            break

    if first_data_line is None:
        fh.close()
        return "".join(header_lines), (line for line in ())

    def lines() -> Generator[str, None, None]:
        with fh:
            yield first_data_line
            for line in fh:
                if line.strip():
                    yield line

    return "".join(header_lines), lines()


def read_header(path: Path) -> str:
    """Read only the header lines of a VCF."""
    header_lines = []
    with open_vcf(path) as fh:
        for line in fh:
            if not line.startswith("#"):
                break
            header_lines.append(line)
    return "".join(header_lines)
