import io
from types import SimpleNamespace

import pytest

from wordcheck.dictionary import LENGTH, Dictionary
from wordcheck.speller import (
    Benchmarks,
    Report,
    calculate,
    iter_words,
    main,
    spell_check,
)


def words_of(text):
    return list(iter_words(io.StringIO(text)))


def test_iter_words_splits_on_punctuation():
    assert words_of("Hello, world!\n") == ["Hello", "world"]


def test_iter_words_keeps_inner_apostrophes():
    assert words_of("don't 'tis\n") == ["don't", "tis"]


def test_iter_words_skips_words_with_digits():
    assert words_of("abc1def ghi ") == ["ghi"]


def test_iter_words_drops_unterminated_last_word():
    assert words_of("one two") == ["one"]


def test_iter_words_length_limit():
    exact = "a" * LENGTH
    assert words_of(exact + " x ") == [exact, "x"]
    assert words_of("a" * (LENGTH + 1) + "bc, ok ") == ["ok"]


def test_iter_words_empty_stream():
    assert words_of("") == []


def test_calculate_sums_user_and_system_time():
    before = SimpleNamespace(ru_utime=1.0, ru_stime=2.0)
    after = SimpleNamespace(ru_utime=1.5, ru_stime=2.25)
    assert calculate(before, after) == pytest.approx(0.75)
    assert calculate(before, before) == 0.0


def test_calculate_missing_sample_is_zero():
    sample = SimpleNamespace(ru_utime=1.0, ru_stime=1.0)
    assert calculate(None, sample) == 0.0
    assert calculate(sample, None) == 0.0


def test_benchmarks_total_is_sum_of_parts():
    b = Benchmarks(load=0.5, check=1.25, size=0.0, unload=0.25)
    assert b.total() == pytest.approx(b.load + b.check + b.size + b.unload)
    assert Benchmarks().total() == 0.0


@pytest.fixture
def dict_path(tmp_path):
    path = tmp_path / "dict"
    path.write_text("the\ncat\nsat\non\nmat\n")
    return path


def test_spell_check_collects_misspellings(dict_path):
    d = Dictionary()
    d.load(dict_path)
    text = "The cat sat on teh mat.\n"
    report = spell_check(d, io.StringIO(text))
    assert isinstance(report, Report)
    assert report.misspelled == ["teh"]
    assert report.words == len(text.split())
    assert report.check_time >= 0.0


def test_main_reports(tmp_path, dict_path, capsys):
    text = tmp_path / "text.txt"
    text.write_text("The cat sat on teh mat.\n")
    assert main([str(dict_path), str(text)]) == 0
    out = capsys.readouterr().out
    assert "MISSPELLED WORDS" in out
    assert "\nteh\n" in out
    assert "WORDS MISSPELLED:     1" in out
    assert "WORDS IN DICTIONARY:  5" in out
    assert "TIME IN TOTAL:" in out


@pytest.mark.parametrize("args", [[], ["a", "b", "c"]])
def test_main_usage(args, capsys):
    assert main(args) == 1
    assert "Usage: ./speller [DICTIONARY] text" in capsys.readouterr().out


def test_main_missing_dictionary(tmp_path, capsys):
    missing = tmp_path / "nodict"
    assert main([str(missing), str(tmp_path / "text")]) == 1
    assert f"Could not load {missing}." in capsys.readouterr().out


def test_main_missing_text(tmp_path, dict_path, capsys):
    missing = tmp_path / "notext"
    assert main([str(dict_path), str(missing)]) == 1
    assert f"Could not open {missing}." in capsys.readouterr().out