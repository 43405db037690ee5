#!/usr/bin/env python3
"""
Sequence utilities for hmmerws
Functions for working with protein sequences
"""
import re
import logging
from typing import List, Tuple, Union

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord

from hmmerws.exceptions import ValidationError, FileOperationError

logger = logging.getLogger("hmmerws.utils.sequence")

# Valid amino acid characters (including ambiguous and rare residues)
VALID_AA = set('ACDEFGHIKLMNPQRSTVWYXBZJUO*')

SequenceLike = Union[str, Seq, SeqRecord]


def sequence_to_string(sequence: SequenceLike) -> str:
    """Normalize a sequence given as str, Seq or SeqRecord

    Whitespace is removed and residues are upper-cased.
    """
    if isinstance(sequence, SeqRecord):
        sequence = sequence.seq
    return re.sub(r'\s+', '', str(sequence)).upper()


def validate_sequence(sequence: str) -> bool:
    """Validate protein sequence

    Args:
        sequence: Protein sequence

    Returns:
        True if valid

    Raises:
        ValidationError: If validation fails
    """
    if not sequence:
        raise ValidationError("Protein sequence cannot be empty")

    invalid_chars = set(sequence.upper()) - VALID_AA
    if invalid_chars:
        raise ValidationError(f"Invalid amino acids in sequence: {', '.join(sorted(invalid_chars))}",
                              {'invalid': sorted(invalid_chars)})

    return True


def read_fasta_sequences(fasta_path: str) -> List[Tuple[str, str]]:
    """Read (id, sequence) pairs from a FASTA file"""
    try:
        records = [(record.id, sequence_to_string(record))
                   for record in SeqIO.parse(fasta_path, "fasta")]
    except OSError as e:
        raise FileOperationError(f"Cannot read FASTA file {fasta_path}: {str(e)}",
                                 {'file_path': str(fasta_path)}) from e
    except ValueError as e:
        raise ValidationError(f"Malformed FASTA file {fasta_path}: {str(e)}",
                              {'file_path': str(fasta_path)}) from e

    if not records:
        raise ValidationError(f"No sequences found in {fasta_path}")

    logger.debug(f"Read {len(records)} sequences from {fasta_path}")
    return records
