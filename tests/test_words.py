import pytest
from fivewords.words import filter_words, letter_of, load_words, natural_mask


def test_letter_of():
    assert letter_of("a") == 0
    assert letter_of("z") == 25
    with pytest.raises(ValueError):
        letter_of("A")


def test_natural_mask_popcount():
    mask = natural_mask("waltz")
    assert bin(mask).count("1") == 5
    assert mask & (1 << letter_of("w"))


def test_natural_mask_repeated_letter():
    assert natural_mask("floor") is None


def test_rejects_repeated_letters():
    result = filter_words(["floor", "llama", "waltz"])
    assert result.words == ["waltz"]


def test_rejects_wrong_length_and_non_letters():
    result = filter_words(["cat", "planets", "ab-cd", "cafés", "", "fjord"])
    assert result.words == ["fjord"]


def test_strips_and_lowercases():
    result = filter_words(["  Waltz\r", "NYMPH\n"])
    assert result.words == ["waltz", "nymph"]


def test_anagrams_keep_first_spelling():
    result = filter_words(["least", "slate", "steal", "tales", "fjord", "least"])
    assert result.words == ["least", "fjord"]
    assert set(result.masks) == {"least", "fjord"}


def test_every_mask_has_five_bits():
    result = filter_words(["waltz", "vibex", "gucks", "fjord", "nymph", "queen", "bread"])
    assert "queen" not in result.words
    for word in result.words:
        assert bin(result.masks[word]).count("1") == 5
        assert result.masks[word] == natural_mask(word)


def test_counts_cover_retained_words_only():
    result = filter_words(["floor", "least", "slate", "fjord"])
    assert result.counts.sum() == 10
    assert result.counts[letter_of("o")] == 1  # fjord only, floor rejected
    assert result.counts[letter_of("l")] == 1  # least only, slate dropped
    assert result.counts[letter_of("z")] == 0


def test_load_words(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("waltz\nvibex\n", encoding="utf-8")
    assert load_words(str(path)) == ["waltz", "vibex"]


def test_load_words_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_words(str(tmp_path / "missing.txt"))
