from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List

from wordlerank.engine.validation import is_clean_word
from wordlerank.errors import FrequencyParseError


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_words(p: Path | str) -> List[str]:
    """
    Load a one-word-per-line list, lowercased, in file order.
    Lines that are not exactly 5 letters a–z are skipped, not reported.
    """
    out: List[str] = []
    for ln in read_lines(p):
        w = ln.strip().lower()
        if is_clean_word(w):
            out.append(w)
    return out


def load_frequencies(p: Path | str) -> Dict[str, int]:
    """
    Load a `word,frequency` table (e.g. a unigram count CSV).

    Rows without a comma and rows whose word is not 5 letters a–z are
    skipped, which also drops a `word,count` header. A kept row whose
    frequency is not an integer raises FrequencyParseError.
    """
    freqs: Dict[str, int] = {}
    for lineno, ln in enumerate(read_lines(p), start=1):
        if "," not in ln:
            continue
        word, raw = ln.split(",", 2)[:2]
        word = word.strip().lower()
        if not is_clean_word(word):
            continue
        try:
            freqs[word] = int(raw.strip())
        except ValueError:
            raise FrequencyParseError(f"{p}:{lineno}: bad frequency {raw!r} for {word!r}") from None
    return freqs
