"""Reserved INFO/FORMAT/ALT/FILTER definitions from the VCFv4.3 format document.

These are the defaults a parser starts from before header declarations
are merged over them.
"""

from typing import Any

RESERVED_INFO_FIELDS: dict[str, dict[str, Any]] = {
    "AA": {"Number": 1, "Type": "String", "Description": "Ancestral allele"},
    "AC": {
        "Number": "A",
        "Type": "Integer",
        "Description": "Allele count in genotypes, for each ALT allele, in the same order as listed",
    },
    "AD": {"Number": "R", "Type": "Integer", "Description": "Total read depth for each allele"},
    "ADF": {
        "Number": "R",
        "Type": "Integer",
        "Description": "Read depth for each allele on the forward strand",
    },
    "ADR": {
        "Number": "R",
        "Type": "Integer",
        "Description": "Read depth for each allele on the reverse strand",
    },
    "AF": {
        "Number": "A",
        "Type": "Float",
        "Description": "Allele frequency for each ALT allele in the same order as listed "
        "(estimated from primary data, not called genotypes)",
    },
    "AN": {"Number": 1, "Type": "Integer", "Description": "Total number of alleles in called genotypes"},
    "BQ": {"Number": 1, "Type": "Float", "Description": "RMS base quality"},
    "CIGAR": {
        "Number": "A",
        "Type": "String",
        "Description": "Cigar string describing how to align an alternate allele to the reference allele",
    },
    "DB": {"Number": 0, "Type": "Flag", "Description": "dbSNP membership"},
    "DP": {"Number": 1, "Type": "Integer", "Description": "Combined depth across samples"},
    "END": {"Number": 1, "Type": "Integer", "Description": "End position (for use with symbolic alleles)"},
    "H2": {"Number": 0, "Type": "Flag", "Description": "HapMap2 membership"},
    "H3": {"Number": 0, "Type": "Flag", "Description": "HapMap3 membership"},
    "MQ": {"Number": 1, "Type": "Float", "Description": "RMS mapping quality"},
    "MQ0": {"Number": 1, "Type": "Integer", "Description": "Number of MAPQ == 0 reads"},
    "NS": {"Number": 1, "Type": "Integer", "Description": "Number of samples with data"},
    "SB": {"Number": 4, "Type": "Integer", "Description": "Strand bias"},
    "SOMATIC": {"Number": 0, "Type": "Flag", "Description": "Somatic mutation (for cancer genomics)"},
    "VALIDATED": {"Number": 0, "Type": "Flag", "Description": "Validated by follow-up experiment"},
    "1000G": {"Number": 0, "Type": "Flag", "Description": "1000 Genomes membership"},
    # structural variants
    "IMPRECISE": {"Number": 0, "Type": "Flag", "Description": "Imprecise structural variation"},
    "NOVEL": {"Number": 0, "Type": "Flag", "Description": "Indicates a novel structural variation"},
    "SVTYPE": {"Number": 1, "Type": "String", "Description": "Type of structural variant"},
    "SVLEN": {
        "Number": ".",
        "Type": "Integer",
        "Description": "Difference in length between REF and ALT alleles",
    },
    "CIPOS": {
        "Number": 2,
        "Type": "Integer",
        "Description": "Confidence interval around POS for imprecise variants",
    },
    "CIEND": {
        "Number": 2,
        "Type": "Integer",
        "Description": "Confidence interval around END for imprecise variants",
    },
    "HOMLEN": {
        "Number": ".",
        "Type": "Integer",
        "Description": "Length of base pair identical micro-homology at event breakpoints",
    },
    "HOMSEQ": {
        "Number": ".",
        "Type": "String",
        "Description": "Sequence of base pair identical micro-homology at event breakpoints",
    },
    "BKPTID": {
        "Number": ".",
        "Type": "String",
        "Description": "ID of the assembled alternate allele in the assembly file",
    },
    "MEINFO": {
        "Number": 4,
        "Type": "String",
        "Description": "Mobile element info of the form NAME,START,END,POLARITY",
    },
    "METRANS": {
        "Number": 4,
        "Type": "String",
        "Description": "Mobile element transduction info of the form CHR,START,END,POLARITY",
    },
    "DGVID": {
        "Number": 1,
        "Type": "String",
        "Description": "ID of this element in Database of Genomic Variation",
    },
    "DBVARID": {"Number": 1, "Type": "String", "Description": "ID of this element in DBVAR"},
    "DBRIPID": {"Number": 1, "Type": "String", "Description": "ID of this element in DBRIP"},
    "MATEID": {"Number": ".", "Type": "String", "Description": "ID of mate breakends"},
    "PARID": {"Number": 1, "Type": "String", "Description": "ID of partner breakend"},
    "EVENT": {"Number": 1, "Type": "String", "Description": "ID of event associated to breakend"},
    "CILEN": {
        "Number": 2,
        "Type": "Integer",
        "Description": "Confidence interval around the inserted material between breakends",
    },
    "DPADJ": {"Number": ".", "Type": "Integer", "Description": "Read Depth of adjacency"},
    "CN": {
        "Number": 1,
        "Type": "Integer",
        "Description": "Copy number of segment containing breakend",
    },
    "CNADJ": {"Number": ".", "Type": "Integer", "Description": "Copy number of adjacency"},
    "CICN": {
        "Number": 2,
        "Type": "Integer",
        "Description": "Confidence interval around copy number for the segment",
    },
    "CICNADJ": {
        "Number": ".",
        "Type": "Integer",
        "Description": "Confidence interval around copy number for the adjacency",
    },
}

RESERVED_FORMAT_FIELDS: dict[str, dict[str, Any]] = {
    "AD": {"Number": "R", "Type": "Integer", "Description": "Read depth for each allele"},
    "ADF": {
        "Number": "R",
        "Type": "Integer",
        "Description": "Read depth for each allele on the forward strand",
    },
    "ADR": {
        "Number": "R",
        "Type": "Integer",
        "Description": "Read depth for each allele on the reverse strand",
    },
    "DP": {"Number": 1, "Type": "Integer", "Description": "Read depth"},
    "EC": {"Number": "A", "Type": "Integer", "Description": "Expected alternate allele counts"},
    "FT": {
        "Number": 1,
        "Type": "String",
        "Description": 'Filter indicating if this genotype was "called"',
    },
    "GL": {"Number": "G", "Type": "Float", "Description": "Genotype likelihoods"},
    "GP": {"Number": "G", "Type": "Float", "Description": "Genotype posterior probabilities"},
    "GQ": {"Number": 1, "Type": "Integer", "Description": "Conditional genotype quality"},
    "GT": {"Number": 1, "Type": "String", "Description": "Genotype"},
    "HQ": {"Number": 2, "Type": "Integer", "Description": "Haplotype quality"},
    "MQ": {"Number": 1, "Type": "Integer", "Description": "RMS mapping quality"},
    "PL": {
        "Number": "G",
        "Type": "Integer",
        "Description": "Phred-scaled genotype likelihoods rounded to the closest integer",
    },
    "PQ": {"Number": 1, "Type": "Integer", "Description": "Phasing quality"},
    "PS": {"Number": 1, "Type": "Integer", "Description": "Phase set"},
}

RESERVED_ALT_TYPES: dict[str, dict[str, Any]] = {
    "DEL": {"Description": "Deletion relative to the reference", "so_term": "deletion"},
    "INS": {
        "Description": "Insertion of novel sequence relative to the reference",
        "so_term": "insertion",
    },
    "DUP": {
        "Description": "Region of elevated copy number relative to the reference",
        "so_term": "copy_number_gain",
    },
    "INV": {"Description": "Inversion of reference sequence", "so_term": "inversion"},
    "CNV": {
        "Description": "Copy number variable region (may be both deletion and duplication)",
        "so_term": "copy_number_variation",
    },
    "DUP:TANDEM": {"Description": "Tandem duplication", "so_term": "copy_number_gain"},
    "DEL:ME": {"Description": "Deletion of mobile element relative to the reference"},
    "INS:ME": {"Description": "Insertion of a mobile element relative to the reference"},
    "NON_REF": {
        "Description": "Represents any possible alternative allele at this location",
        "so_term": "sequence_variant",
    },
    "*": {
        "Description": "Represents any possible alternative allele at this location",
        "so_term": "sequence_variant",
    },
}

RESERVED_FILTER_TYPES: dict[str, dict[str, Any]] = {
    "PASS": {"Description": "Passed all filters"},
}

RESERVED_CATEGORIES: dict[str, dict[str, dict[str, Any]]] = {
    "INFO": RESERVED_INFO_FIELDS,
    "FORMAT": RESERVED_FORMAT_FIELDS,
    "ALT": RESERVED_ALT_TYPES,
    "FILTER": RESERVED_FILTER_TYPES,
}
