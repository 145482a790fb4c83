import pytest

# Small mixed list: repeated letters, shared letters, and unrelated words.
WORDS = [
    "crane", "crate", "trace", "cater", "react", "slate", "stale", "least",
    "erase", "there", "three", "eerie", "geese", "level", "belle", "lemon",
    "hello", "llama", "scoop", "cools", "stone", "shine", "write", "print",
    "cloud", "bring", "tribe", "fresh", "mount", "grind", "pride", "olive",
    "honey", "sassy", "mamma", "queen", "fuzzy", "jazzy", "abbey", "robot",
]


@pytest.fixture
def words():
    return list(WORDS)
