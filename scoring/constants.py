"""Global constants for sequence scoring.

These are fixed values that are not meant to be configurable
and represent fundamental properties of DNA and RNA sequences.
"""

# Nucleotide alphabets (membership is checked case-insensitively)
DNA_ALPHABET = frozenset("ATCG")
RNA_ALPHABET = frozenset("AUCG")

# Watson-Crick complementary base pairs for RNA (no G-U wobble)
COMPLEMENTARY_BASES = {"A": "U", "U": "A", "G": "C", "C": "G"}

# Alphabet checking policies
STRICT = "strict"
PERMISSIVE = "permissive"
ALPHABET_POLICIES = (STRICT, PERMISSIVE)
