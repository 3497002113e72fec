"""Phenotype resolution for the variable-length color genome.

A color is recessive: it shows only when the genome carries at least two
copies of it. When several colors reach the threshold, the one earliest in
the dominance order wins. With no color at the threshold the fish shows the
default color.
"""

from collections import Counter
from typing import Iterable, Optional

from koi.genetics.catalog import DEFAULT_GENE, GeneId, dominance_rank

EXPRESSION_THRESHOLD = 2


def gene_counts(genome: Iterable[Optional[GeneId]]) -> Counter:
    """Count copies per gene, ignoring empty slots."""
    return Counter(gene for gene in genome if gene)


def resolve_phenotype(genome: Iterable[Optional[GeneId]]) -> GeneId:
    """Reduce a genome to its single expressed color gene."""
    candidates = [
        gene for gene, count in gene_counts(genome).items() if count >= EXPRESSION_THRESHOLD
    ]
    if not candidates:
        return DEFAULT_GENE
    return min(candidates, key=dominance_rank)
