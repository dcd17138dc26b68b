import random

import pytest

from guess_word.services.dictionary import Dictionary


def test_contains_is_case_sensitive(dictionary):
    assert dictionary.contains("crane")
    assert "crane" in dictionary
    assert not dictionary.contains("CRANE")
    assert not dictionary.contains("cranes")


def test_duplicates_collapse():
    dictionary = Dictionary(["crane", "crane", "trace"])
    assert len(dictionary) == 2


def test_random_word_comes_from_dictionary(dictionary):
    for _ in range(20):
        assert dictionary.random_word() in dictionary


def test_random_word_is_reproducible_with_seeded_rng(dictionary):
    first = dictionary.random_word(random.Random(7))
    second = dictionary.random_word(random.Random(7))
    assert first == second


def test_random_word_covers_every_word():
    dictionary = Dictionary(["crane", "trace"])
    rng = random.Random(0)
    picked = {dictionary.random_word(rng) for _ in range(100)}
    assert picked == {"crane", "trace"}


def test_empty_dictionary_is_rejected():
    with pytest.raises(ValueError):
        Dictionary([])


def test_wrong_length_entries_are_rejected():
    with pytest.raises(ValueError, match="not 5 characters long"):
        Dictionary(["crane", "cranes"])


def test_other_word_lengths_are_supported():
    dictionary = Dictionary(["planet", "palate"], word_length=6)
    assert dictionary.word_length == 6
    assert dictionary.contains("planet")


def test_from_lines_skips_blank_lines_and_whitespace():
    dictionary = Dictionary.from_lines(["crane\n", "  trace ", "", "\n"])
    assert len(dictionary) == 2
    assert dictionary.contains("trace")


def test_from_file_reads_newline_delimited_list(tmp_path):
    word_file = tmp_path / "words.txt"
    word_file.write_text("crane\nTRACE\n\nstare\n", encoding="utf-8")

    dictionary = Dictionary.from_file(str(word_file))

    assert sorted(dictionary) == ["crane", "stare", "trace"]


def test_bundled_word_list_loads():
    dictionary = Dictionary.from_file()
    assert len(dictionary) > 100
    assert dictionary.contains("haste")
    assert dictionary.contains("sleep")


def test_from_lines_and_from_file_share_one_policy(tmp_path):
    lines = ["CRANE", " Trace ", "crane", ""]
    word_file = tmp_path / "words.txt"
    word_file.write_text("\n".join(lines), encoding="utf-8")

    from_lines = Dictionary.from_lines(lines)
    from_file = Dictionary.from_file(str(word_file))

    assert sorted(from_lines) == sorted(from_file) == ["crane", "trace"]


def test_from_lines_rejects_non_alphabetic():
    with pytest.raises(ValueError, match="non-alphabetic"):
        Dictionary.from_lines(["crane", "cr4ne"])
