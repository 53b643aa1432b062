"""Exceptions raised while decoding VCF headers and records."""


class VCFDecodeError(ValueError):
    """Base class for all decoding failures."""

    pass


class HeaderError(VCFDecodeError):
    """Raised when the VCF header is malformed or incomplete."""

    pass


class RecordError(VCFDecodeError):
    """Raised when a single data line cannot be decoded."""

    pass


class BreakendError(VCFDecodeError):
    """Raised when a structural-variant ALT allele has unparseable notation."""

    pass
