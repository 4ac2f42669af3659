"""Small word and phrase puzzles."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping

_WORD_SEPARATORS = re.compile(r"[ \-_]+")

_LETTER_VALUES: dict[str, int] = {
    **dict.fromkeys("AEIOULNRST", 1),
    **dict.fromkeys("DG", 2),
    **dict.fromkeys("BCMP", 3),
    **dict.fromkeys("FHVWY", 4),
    "K": 5,
    **dict.fromkeys("JX", 8),
    **dict.fromkeys("QZ", 10),
}

_ALPHABET_SIZE = 26


def accumulate(items: Iterable[str], converter: Callable[[str], str]) -> list[str]:
    """Apply ``converter`` to every item and return the results in order."""
    return [converter(item) for item in items]


def abbreviate(phrase: str) -> str:
    """Build an acronym from the first letter of each word.

    Words are separated by spaces, hyphens and underscores.
    """
    words = (word for word in _WORD_SEPARATORS.split(phrase) if word)
    return "".join(word[0].upper() for word in words)


def _has_letter(text: str) -> bool:
    return any(ch.isalpha() for ch in text)


def _is_silent(text: str) -> bool:
    return not any(ch.isalpha() or ch.isnumeric() for ch in text)


def _is_question(text: str) -> bool:
    return text.rstrip(" ").endswith("?")


def hey(remark: str) -> str:
    """Return Bob's reply to ``remark``."""
    question = _is_question(remark)
    shouting = _has_letter(remark) and remark == remark.upper()
    if question and shouting:
        return "Calm down, I know what I'm doing!"
    if question:
        return "Sure."
    if shouting:
        return "Whoa, chill out!"
    if _is_silent(remark):
        return "Fine. Be that way!"
    return "Whatever."


def transform(legacy: Mapping[int, Iterable[str]]) -> dict[str, int]:
    """Turn a score-to-letters mapping into a lowercase letter-to-score mapping."""
    return {
        letter.lower(): score
        for score, letters in legacy.items()
        for letter in letters
    }


def hello_world() -> str:
    """Return the classic greeting."""
    return "Hello, World!"


def is_isogram(text: str) -> bool:
    """Tell whether no letter occurs more than once, ignoring case."""
    seen: set[str] = set()
    for ch in text:
        if not ch.isalpha():
            continue
        key = ch.upper()
        if key in seen:
            return False
        seen.add(key)
    return True


def is_pangram(text: str) -> bool:
    """Tell whether ``text`` uses every letter of the English alphabet."""
    letters = {ch.lower() for ch in text if ch.isalpha()}
    return len(letters) == _ALPHABET_SIZE


def proverb(rhyme: list[str]) -> list[str]:
    """Recite the 'for want of a nail' proverb for the given pieces."""
    lines = [
        f"For want of a {wanted} the {lost} was lost."
        for wanted, lost in zip(rhyme, rhyme[1:])
    ]
    if rhyme:
        lines.append(f"And all for the want of a {rhyme[0]}.")
    return lines


def raindrops(number: int) -> str:
    """Convert a number to raindrop sounds according to its factors 3, 5 and 7."""
    sounds = "".join(
        sound
        for factor, sound in ((3, "Pling"), (5, "Plang"), (7, "Plong"))
        if number % factor == 0
    )
    return sounds or str(number)


def reverse(text: str) -> str:
    """Reverse a string character by character."""
    return text[::-1]


def scrabble_score(word: str) -> int:
    """Sum the Scrabble values of the letters in ``word``."""
    return sum(_LETTER_VALUES.get(ch.upper(), 0) for ch in word)


def share_with(name: str = "") -> str:
    """Say who gets the other one; an empty name means 'you'."""
    return f"One for {name or 'you'}, one for me."