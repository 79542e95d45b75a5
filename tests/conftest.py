"""Shared test fixtures for wavealign tests."""

import random

import pytest


# (a, b, edit distance)
SCENARIOS = [
    ("atggc", "cggc", 2),
    ("monkey", "money", 1),
    ("", "abc", 3),
    ("abc", "", 3),
    ("", "", 0),
    ("kitten", "sitting", 3),
    ("abc", "abc", 0),
    ("flaw", "lawn", 2),
    ("intention", "execution", 5),
    ("a", "b", 1),
    ("ab", "ba", 2),
    ("ACGTACGTACGT", "ACGTACATACGT", 1),
]


def mutate(seq, n_edits, rng, alphabet="ACGT"):
    """Apply *n_edits* random substitutions, insertions and deletions to *seq*."""
    out = list(seq)
    for _ in range(n_edits):
        kind = rng.choice("sid")
        if kind == "i" or not out:
            out.insert(rng.randint(0, len(out)), rng.choice(alphabet))
        elif kind == "d":
            del out[rng.randrange(len(out))]
        else:
            out[rng.randrange(len(out))] = rng.choice(alphabet)
    return "".join(out)


@pytest.fixture
def aligner():
    """Default WavefrontAligner instance."""
    from wavealign import WavefrontAligner
    return WavefrontAligner()


@pytest.fixture
def unpruned_aligner():
    """Aligner that expands every reachable diagonal."""
    from wavealign import WavefrontAligner
    return WavefrontAligner(prune=False)


@pytest.fixture
def similar_pairs():
    """Pairs of related sequences differing by a few random edits."""
    rng = random.Random(42)
    pairs = []
    for _ in range(150):
        base = "".join(rng.choice("ACGT") for _ in range(rng.randint(0, 40)))
        pairs.append((base, mutate(base, rng.randint(0, 6), rng)))
    return pairs


@pytest.fixture
def unrelated_pairs():
    """Independent random sequences over a small alphabet."""
    rng = random.Random(7)
    pairs = []
    for _ in range(150):
        a = "".join(rng.choice("AB") for _ in range(rng.randint(0, 15)))
        b = "".join(rng.choice("AB") for _ in range(rng.randint(0, 15)))
        pairs.append((a, b))
    return pairs


@pytest.fixture
def long_similar_pair():
    """2 kb sequence and a copy with a SNP, a 5bp insertion and a 3bp deletion."""
    rng = random.Random(300)
    target = "".join(rng.choice("ACGT") for _ in range(2000))
    snp = {"A": "T", "T": "A", "C": "G", "G": "C"}[target[500]]
    query = target[:500] + snp + target[501:1000] + "GATTC" + target[1000:1500] + target[1503:]
    return query, target
