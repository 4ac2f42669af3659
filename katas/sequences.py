"""Puzzles over strings of digits, bases and brackets."""

from __future__ import annotations

from math import prod

_DIGITS = "0123456789"

_OPENERS = {"}": "{", ")": "(", "]": "["}
_BRACKETS = frozenset("{}()[]")

_DNA_TO_RNA = str.maketrans("GCTA", "CGAU")

_CODONS: dict[str, str] = {
    "AUG": "Methionine",
    "UUU": "Phenylalanine",
    "UUC": "Phenylalanine",
    "UUA": "Leucine",
    "UUG": "Leucine",
    "UCU": "Serine",
    "UCC": "Serine",
    "UCA": "Serine",
    "UCG": "Serine",
    "UAU": "Tyrosine",
    "UAC": "Tyrosine",
    "UGU": "Cysteine",
    "UGC": "Cysteine",
    "UGG": "Tryptophan",
}
_STOP_CODONS = frozenset({"UAA", "UAG", "UGA"})

_HANDSHAKE_ACTIONS = (
    (1, "wink"),
    (2, "double blink"),
    (4, "close your eyes"),
    (8, "jump"),
)
_REVERSE_FLAG = 16


class StopCodon(Exception):
    """Raised when a codon marks the end of translation."""

    def __init__(self, codon: str) -> None:
        super().__init__(f"stop codon {codon!r}")
        self.codon = codon


class InvalidCodonError(ValueError):
    """Raised for a codon that names no amino acid.

    ``translated`` holds the proteins read before the bad codon.
    """

    def __init__(self, codon: str, translated: list[str] | None = None) -> None:
        super().__init__(f"invalid codon {codon!r}")
        self.codon = codon
        self.translated = list(translated or [])


def hamming_distance(a: str, b: str) -> int:
    """Count positions where two equally long strands differ."""
    if len(a) != len(b):
        raise ValueError("string lengths should be equal")
    return sum(x != y for x, y in zip(a, b))


def luhn_valid(number: str) -> bool:
    """Check a number with the Luhn algorithm; spaces are ignored."""
    total = 0
    count = 0
    for ch in reversed(number):
        if ch == " ":
            continue
        if ch not in _DIGITS:
            return False
        count += 1
        digit = int(ch)
        if count % 2 == 0:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return count > 1 and total % 10 == 0


def brackets_balanced(text: str) -> bool:
    """Tell whether every bracket in ``text`` is matched and properly nested."""
    stack: list[str] = []
    for ch in text:
        if ch not in _BRACKETS:
            continue
        opener = _OPENERS.get(ch)
        if opener is not None and stack and stack[-1] == opener:
            stack.pop()
        else:
            stack.append(ch)
    return not stack


def all_series(n: int, text: str) -> list[str]:
    """Return every contiguous substring of ``text`` that is ``n`` long."""
    return [text[i:i + n] for i in range(len(text) - n + 1)]


def unsafe_first(n: int, text: str) -> str:
    """Return the first ``n`` characters, or an empty string if too short."""
    if len(text) < n:
        return ""
    return text[:n]


def first(n: int, text: str) -> str | None:
    """Return the first ``n`` characters, or None when there is no such series."""
    return unsafe_first(n, text) or None


def to_rna(dna: str) -> str:
    """Return the RNA complement of a DNA strand."""
    return dna.translate(_DNA_TO_RNA)


def from_codon(codon: str) -> str:
    """Translate one codon into its amino acid.

    Raises StopCodon for a stop codon and InvalidCodonError for anything unknown.
    """
    if codon in _STOP_CODONS:
        raise StopCodon(codon)
    try:
        return _CODONS[codon]
    except KeyError:
        raise InvalidCodonError(codon) from None


def from_rna(rna: str) -> list[str]:
    """Translate an RNA strand codon by codon until a stop codon or its end.

    A trailing partial codon is ignored.
    """
    proteins: list[str] = []
    for start in range(0, len(rna) - 2, 3):
        codon = rna[start:start + 3]
        try:
            proteins.append(from_codon(codon))
        except StopCodon:
            break
        except InvalidCodonError as err:
            raise InvalidCodonError(codon, proteins) from err
    return proteins


def largest_series_product(digits: str, span: int) -> int:
    """Return the largest product of ``span`` adjacent digits."""
    if span > len(digits):
        raise ValueError("span is larger than digits length")
    if span < 0:
        raise ValueError("span is smaller than zero")
    if not digits or span == 0:
        return 1
    if any(ch not in _DIGITS for ch in digits):
        raise ValueError("non valid digit is encountered")
    values = [int(ch) for ch in digits]
    return max(
        prod(values[i:i + span]) for i in range(len(values) - span + 1)
    )


def handshake(code: int) -> list[str]:
    """Decode the secret handshake actions encoded in ``code``."""
    actions = [action for bit, action in _HANDSHAKE_ACTIONS if code & bit]
    if code & _REVERSE_FLAG:
        actions.reverse()
    return actions