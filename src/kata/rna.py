"""Translate an RNA strand into the proteins its codons encode."""

from typing import Dict, List, Optional

STOP = "STOP"

_CODONS_BY_PROTEIN: Dict[str, List[str]] = {
    "Methionine": ["AUG"],
    "Phenylalanine": ["UUU", "UUC"],
    "Leucine": ["UUA", "UUG"],
    "Serine": ["UCU", "UCC", "UCA", "UCG"],
    "Tyrosine": ["UAU", "UAC"],
    "Cysteine": ["UGU", "UGC"],
    "Tryptophan": ["UGG"],
    STOP: ["UAA", "UAG", "UGA"],
}

CODON_TABLE: Dict[str, str] = {
    codon: protein for protein, codons in _CODONS_BY_PROTEIN.items() for codon in codons
}


def translate(rna: Optional[str]) -> List[str]:
    """
    Proteins for each codon of `rna`, up to the first stop codon.
    Raises ValueError on a codon outside the table (including a short tail).
    """
    if rna is None:
        return []

    proteins: List[str] = []
    for start in range(0, len(rna), 3):
        codon = rna[start:start + 3]
        if codon not in CODON_TABLE:
            raise ValueError(f"Invalid codon: {codon!r}")
        protein = CODON_TABLE[codon]
        if protein == STOP:
            break
        proteins.append(protein)
    return proteins
