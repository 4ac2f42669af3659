import pytest

from katas.sequences import (
    InvalidCodonError,
    StopCodon,
    all_series,
    brackets_balanced,
    first,
    from_codon,
    from_rna,
    handshake,
    hamming_distance,
    largest_series_product,
    luhn_valid,
    to_rna,
    unsafe_first,
)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("", "", 0),
        ("A", "A", 0),
        ("G", "T", 1),
        ("GGACTGAAATCTG", "GGACTGAAATCTG", 0),
        ("GGACGGATTCTG", "AGGACGGATTCT", 9),
    ],
)
def test_hamming_distance(a, b, expected):
    assert hamming_distance(a, b) == expected


@pytest.mark.parametrize("a, b", [("AATG", "AAA"), ("ATA", "AGTG")])
def test_hamming_distance_unequal_lengths(a, b):
    with pytest.raises(ValueError):
        hamming_distance(a, b)


@pytest.mark.parametrize(
    "number, expected",
    [
        ("1", False),
        ("0", False),
        ("059", True),
        ("59", True),
        ("055 444 285", True),
        ("055 444 286", False),
        ("8273 1232 7352 0569", False),
        ("095 245 88", True),
        ("234 567 891 234", True),
        ("059a", False),
        ("055-444-285", False),
        ("055# 444$ 285", False),
        (" 0", False),
        ("0000 0", True),
        ("091", True),
        ("055b 444 285", False),
        (":9", False),
    ],
)
def test_luhn_valid(number, expected):
    assert luhn_valid(number) is expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[]", True),
        ("", True),
        ("[[", False),
        ("}{", False),
        ("{]", False),
        ("{ }", True),
        ("{[])", False),
        ("{[]}", True),
        ("{}[]", True),
        ("([{}({}[])])", True),
        ("{[)][]}", False),
        ("([{])", False),
        ("[({]})", False),
        ("{}[", False),
        ("[]]", False),
        ("(((185 + 223.85) * 15) - 543)/2", True),
        (
            "\\left(\\begin{array}{cc} \\frac{1}{3} & x\\\\ \\mathrm{e}^{x} &... x^2 \\end{array}\\right)",
            True,
        ),
    ],
)
def test_brackets_balanced(text, expected):
    assert brackets_balanced(text) is expected


CX = "01032987583"

SERIES_CASES = [
    (1, "01234", ["0", "1", "2", "3", "4"]),
    (1, "92834", ["9", "2", "8", "3", "4"]),
    (2, "01234", ["01", "12", "23", "34"]),
    (2, "98273463", ["98", "82", "27", "73", "34", "46", "63"]),
    (2, "37103", ["37", "71", "10", "03"]),
    (3, "01234", ["012", "123", "234"]),
    (3, "31001", ["310", "100", "001"]),
    (3, "982347", ["982", "823", "234", "347"]),
    (4, "01234", ["0123", "1234"]),
    (4, "91274", ["9127", "1274"]),
    (5, "01234", ["01234"]),
    (5, "81228", ["81228"]),
    (6, "01234", []),
    (len(CX) + 1, CX, []),
]


@pytest.mark.parametrize("n, text, expected", SERIES_CASES)
def test_all_series(n, text, expected):
    assert all_series(n, text) == expected


@pytest.mark.parametrize(
    "n, text, expected", [case for case in SERIES_CASES if case[2]]
)
def test_unsafe_first(n, text, expected):
    assert unsafe_first(n, text) == expected[0]


def test_unsafe_first_too_short():
    assert unsafe_first(6, "01234") == ""


@pytest.mark.parametrize("n, text, expected", SERIES_CASES)
def test_first(n, text, expected):
    assert first(n, text) == (expected[0] if expected else None)


@pytest.mark.parametrize(
    "dna, expected",
    [
        ("", ""),
        ("C", "G"),
        ("G", "C"),
        ("T", "A"),
        ("A", "U"),
        ("ACGTGGTCTTAA", "UGCACCAGAAUU"),
    ],
)
def test_to_rna(dna, expected):
    assert to_rna(dna) == expected


@pytest.mark.parametrize(
    "codon, expected",
    [
        ("AUG", "Methionine"),
        ("UUU", "Phenylalanine"),
        ("UUC", "Phenylalanine"),
        ("UUA", "Leucine"),
        ("UUG", "Leucine"),
        ("UCG", "Serine"),
        ("UAU", "Tyrosine"),
        ("UAC", "Tyrosine"),
        ("UGU", "Cysteine"),
        ("UGG", "Tryptophan"),
    ],
)
def test_from_codon(codon, expected):
    assert from_codon(codon) == expected


@pytest.mark.parametrize("codon", ["UAA", "UAG", "UGA"])
def test_from_codon_stop(codon):
    with pytest.raises(StopCodon) as info:
        from_codon(codon)
    assert info.value.codon == codon


def test_from_codon_invalid():
    with pytest.raises(InvalidCodonError) as info:
        from_codon("ABC")
    assert info.value.codon == "ABC"


@pytest.mark.parametrize(
    "rna, expected",
    [
        ("AUGUUUUCUUAAAUG", ["Methionine", "Phenylalanine", "Serine"]),
        ("AUGUUUUGG", ["Methionine", "Phenylalanine", "Tryptophan"]),
        ("AUGUUUUAA", ["Methionine", "Phenylalanine"]),
        ("UGGUGUUAUUAAUGGUUU", ["Tryptophan", "Cysteine", "Tyrosine"]),
    ],
)
def test_from_rna(rna, expected):
    assert from_rna(rna) == expected


def test_from_rna_invalid_keeps_partial_translation():
    with pytest.raises(InvalidCodonError) as info:
        from_rna("UGGAGAAUUAAUGGUUU")
    assert info.value.translated == ["Tryptophan"]
    assert info.value.codon == "AGA"


@pytest.mark.parametrize(
    "digits, span, expected",
    [
        ("29", 2, 18),
        ("0123456789", 2, 72),
        ("576802143", 2, 48),
        ("0123456789", 3, 504),
        ("1027839564", 3, 270),
        ("0123456789", 5, 15120),
        ("73167176531330624919225119674426574742355349194934", 6, 23520),
        ("0000", 2, 0),
        ("99099", 3, 0),
        ("", 0, 1),
        ("123", 0, 1),
    ],
)
def test_largest_series_product(digits, span, expected):
    assert largest_series_product(digits, span) == expected


@pytest.mark.parametrize(
    "digits, span",
    [("123", 4), ("", 1), ("1234a5", 2), ("12345", -1)],
)
def test_largest_series_product_errors(digits, span):
    with pytest.raises(ValueError):
        largest_series_product(digits, span)


@pytest.mark.parametrize(
    "code, expected",
    [
        (1, ["wink"]),
        (2, ["double blink"]),
        (4, ["close your eyes"]),
        (8, ["jump"]),
        (3, ["wink", "double blink"]),
        (19, ["double blink", "wink"]),
        (24, ["jump"]),
        (16, []),
        (15, ["wink", "double blink", "close your eyes", "jump"]),
        (31, ["jump", "close your eyes", "double blink", "wink"]),
        (0, []),
    ],
)
def test_handshake(code, expected):
    assert handshake(code) == expected