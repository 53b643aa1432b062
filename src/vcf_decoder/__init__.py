"""vcf-decoder: lazy, header-aware decoding of VCF records."""

from .breakend import Breakend, parse_breakend
from .errors import BreakendError, HeaderError, RecordError, VCFDecodeError
from .genotypes import parse_genotypes_only, process_genotypes
from .header import VCFHeader
from .meta_string import parse_meta_string
from .models import Variant
from .parser import VCFParser

__version__ = "0.1.0"

__all__ = [
    "Breakend",
    "BreakendError",
    "HeaderError",
    "RecordError",
    "VCFDecodeError",
    "VCFHeader",
    "VCFParser",
    "Variant",
    "__version__",
    "parse_breakend",
    "parse_genotypes_only",
    "parse_meta_string",
    "process_genotypes",
]
