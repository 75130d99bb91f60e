# wordcheck

A small spell-checker. It loads a word list into memory, reads a text, prints
every word of the text that is not in the list, and ends with a summary of
counts and the CPU time spent loading the list, checking words, counting the
list and unloading it.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
wordcheck [DICTIONARY] TEXT
```

The same command can be run as `python -m wordcheck.speller [DICTIONARY] TEXT`.

`DICTIONARY` is a file of words separated by whitespace. Every word in it must
start with an ASCII letter. If you leave it out, the file
`dictionaries/large` relative to the current directory is used. Both files are
read as Latin-1 text.

The output looks like this:

```

MISSPELLED WORDS

teh
recieve

WORDS MISSPELLED:     2
WORDS IN DICTIONARY:  143091
WORDS IN TEXT:        1204
TIME IN load:         0.04
TIME IN check:        0.01
TIME IN size:         0.00
TIME IN unload:       0.00
TIME IN TOTAL:        0.05

```

Times are user plus system CPU seconds. `WORDS IN DICTIONARY` counts every
word read from the list, duplicates included.

The command prints a message and exits with status 1 when:

- it is given neither one nor two arguments (it prints a usage line);
- the dictionary can't be opened, or holds a word that does not start with a
  letter (`Could not load ...`);
- the text can't be opened (`Could not open ...`) or read
  (`Error reading ...`).

## What counts as a word

- A word is a run of ASCII letters, with apostrophes allowed after its first
  letter. An apostrophe can't start a word.
- Any run of letters and digits that contains a digit is skipped.
- A run of letters longer than 45 characters is skipped.
- A word is only counted once a character that is not part of it follows it; a
  word that runs up to the very end of the text, with nothing after it, is not
  checked.
- Matching against the dictionary ignores case.

## Library use

```python
from wordcheck.dictionary import Dictionary
from wordcheck.speller import iter_words, spell_check

dictionary = Dictionary()
dictionary.load("dictionaries/large")   # OSError or ValueError on failure

"Hello" in dictionary        # case-insensitive membership, same as dictionary.check("Hello")
len(dictionary)              # words loaded, same as dictionary.size()

with open("text.txt", encoding="latin-1") as stream:
    report = spell_check(dictionary, stream)

report.misspelled            # misspelled words, in the order found
report.words                 # number of words checked
report.check_time            # CPU seconds spent in Dictionary.check

with open("text.txt", encoding="latin-1") as stream:
    words = list(iter_words(stream))   # the words the checker would look up

dictionary.unload()          # empties the dictionary
```

`spell_check` and `iter_words` take a text stream (anything with a `read`
method returning `str`), not a binary one.

Other names in the modules:

- `wordcheck.dictionary.hash_word(word)` gives the bucket of a word, 0 for
  `A`/`a` up to 25 for `Z`/`z`; it raises `ValueError` if the word does not
  start with an ASCII letter.
- `wordcheck.dictionary.LENGTH` is the longest word length, 45.
- `wordcheck.speller.Benchmarks` holds the `load`, `check`, `size` and
  `unload` timings the command reports; `Benchmarks.total()` is their sum.
- `wordcheck.speller.calculate(before, after)` gives the user plus system
  seconds between two samples that have `ru_utime` and `ru_stime` attributes
  in seconds, or 0.0 if either is `None`.

## What it does not do

No word list ships with the package. The default `dictionaries/large` must be
provided by you in the directory the command is run from, or a dictionary
given on the command line. The checker does not suggest corrections.