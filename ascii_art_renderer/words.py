#!/usr/bin/env python3
"""
Image to ASCII Art Renderer - Words
===================================
Spelling helpers: integers to English words and letter-by-letter text.
"""


_BELOW_20 = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen",
)
_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")
_SCALES = (
    (10**12, "trillion"),
    (10**9, "billion"),
    (10**6, "million"),
    (10**3, "thousand"),
    (1, ""),
)
MAX_MAGNITUDE = 10**15


def _three_digits(num: int) -> str:
    hundred, rest = divmod(num, 100)
    parts = []
    if hundred:
        parts.append(f"{_BELOW_20[hundred]} hundred")
    if rest:
        if rest < 20:
            parts.append(_BELOW_20[rest])
        else:
            tens, units = divmod(rest, 10)
            parts.append(_TENS[tens] + (f"-{_BELOW_20[units]}" if units else ""))
    return " ".join(parts)


def number_to_words(num: int) -> str:
    """English words for `num`, e.g. 1408 -> 'one thousand four hundred eight'."""
    if num == 0:
        return "zero"
    if abs(num) >= MAX_MAGNITUDE:
        raise ValueError(f"{num} is out of range; magnitude must be below {MAX_MAGNITUDE}")

    sign = "minus " if num < 0 else ""
    num = abs(num)
    groups = []
    for value, name in _SCALES:
        if num >= value:
            chunk, num = divmod(num, value)
            groups.append(f"{_three_digits(chunk)} {name}".rstrip())
    return sign + " ".join(groups)


def letters_separated(word: str, sep: str = " ", uppercase: bool = True) -> str:
    """Drop whitespace and join the remaining characters with `sep`."""
    letters = [ch.upper() if uppercase else ch for ch in word if not ch.isspace()]
    return sep.join(letters)


def spelled_for_speech(word: str) -> str:
    """Letter-by-letter text with pauses, e.g. 'Morizo' -> 'M, O, R, I, Z, O'."""
    return letters_separated(word, sep=", ", uppercase=True)
