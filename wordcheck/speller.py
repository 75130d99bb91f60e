"""Spell-check a text file against a dictionary and report timings."""

from __future__ import annotations

import os
import string
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import NamedTuple, TextIO

from wordcheck.dictionary import LENGTH, Dictionary

DEFAULT_DICTIONARY = "dictionaries/large"

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_ALNUM = _LETTERS | _DIGITS


class _Usage(NamedTuple):
    ru_utime: float
    ru_stime: float


def _usage() -> _Usage:
    times = os.times()
    return _Usage(times.user, times.system)


@dataclass
class Benchmarks:
    """Seconds of CPU time spent in each dictionary operation."""

    load: float = 0.0
    check: float = 0.0
    size: float = 0.0
    unload: float = 0.0

    def total(self) -> float:
        """Return the time spent in all operations together."""
        return self.load + self.check + self.size + self.unload


@dataclass
class Report:
    """Result of spell-checking one text."""

    misspelled: list[str] = field(default_factory=list)
    words: int = 0
    check_time: float = 0.0


def _chars(stream: TextIO) -> Iterator[str]:
    while chunk := stream.read(8192):
        yield from chunk


def iter_words(stream: TextIO) -> Iterator[str]:
    """Yield the words of a text stream.

    A word is a run of ASCII letters, possibly with apostrophes after its
    first letter, ended by any other character. Runs longer than LENGTH
    and runs containing digits are skipped; a word still open at the end
    of the stream is dropped.
    """
    chars = _chars(stream)
    word: list[str] = []
    for c in chars:
        if c in _LETTERS or (c == "'" and word):
            word.append(c)
            if len(word) > LENGTH:
                for rest in chars:
                    if rest not in _LETTERS:
                        break
                word.clear()
        elif c in _DIGITS:
            for rest in chars:
                if rest not in _ALNUM:
                    break
            word.clear()
        elif word:
            yield "".join(word)
            word.clear()


def calculate(before, after) -> float:
    """Return the user plus system seconds elapsed between two usage samples."""
    if before is None or after is None:
        return 0.0
    return (after.ru_utime - before.ru_utime) + (after.ru_stime - before.ru_stime)


def spell_check(dictionary: Dictionary, stream: TextIO) -> Report:
    """Check every word of ``stream`` and collect the misspelled ones."""
    report = Report()
    for word in iter_words(stream):
        report.words += 1
        before = _usage()
        misspelled = not dictionary.check(word)
        after = _usage()
        report.check_time += calculate(before, after)
        if misspelled:
            report.misspelled.append(word)
    return report


def main(argv: Sequence[str] | None = None) -> int:
    """Run the spell-checker: ``speller [DICTIONARY] text``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (1, 2):
        print("Usage: ./speller [DICTIONARY] text")
        return 1

    dictionary_path = args[0] if len(args) == 2 else DEFAULT_DICTIONARY
    text_path = args[-1]
    bench = Benchmarks()
    dictionary = Dictionary()

    before = _usage()
    try:
        dictionary.load(dictionary_path)
    except (OSError, ValueError):
        print(f"Could not load {dictionary_path}.")
        return 1
    bench.load = calculate(before, _usage())

    try:
        text = open(text_path, encoding="latin-1")
    except OSError:
        print(f"Could not open {text_path}.")
        dictionary.unload()
        return 1

    print("\nMISSPELLED WORDS\n")
    with text:
        try:
            report = spell_check(dictionary, text)
        except OSError:
            print(f"Error reading {text_path}.")
            dictionary.unload()
            return 1
    for word in report.misspelled:
        print(word)
    bench.check = report.check_time

    before = _usage()
    n = dictionary.size()
    bench.size = calculate(before, _usage())

    before = _usage()
    dictionary.unload()
    bench.unload = calculate(before, _usage())

    print(f"\nWORDS MISSPELLED:     {len(report.misspelled)}")
    print(f"WORDS IN DICTIONARY:  {n}")
    print(f"WORDS IN TEXT:        {report.words}")
    print(f"TIME IN load:         {bench.load:.2f}")
    print(f"TIME IN check:        {bench.check:.2f}")
    print(f"TIME IN size:         {bench.size:.2f}")
    print(f"TIME IN unload:       {bench.unload:.2f}")
    print(f"TIME IN TOTAL:        {bench.total():.2f}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())