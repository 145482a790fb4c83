from .validator import validate_wordlists, pretty_summary
from .io import load_frequencies, load_words, read_lines, write_lines

__all__ = [
    "validate_wordlists",
    "pretty_summary",
    "load_frequencies",
    "load_words",
    "read_lines",
    "write_lines",
]
