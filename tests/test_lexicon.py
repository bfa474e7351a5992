import pytest

from bogglegame.lexicon import Lexicon


@pytest.fixture
def lexicon():
    return Lexicon(["Boggle", "board", "cube", "cubes", "  word  ", ""])


def test_contains_is_case_insensitive(lexicon):
    assert "boggle" in lexicon
    assert "BOGGLE" in lexicon
    assert "Word" in lexicon


def test_missing_word_is_not_contained(lexicon):
    assert "bog" not in lexicon
    assert "zebra" not in lexicon


def test_non_string_is_not_contained(lexicon):
    assert 42 not in lexicon


def test_len_ignores_blank_entries(lexicon):
    assert len(lexicon) == len({"boggle", "board", "cube", "cubes", "word"})


def test_duplicates_are_collapsed():
    assert len(Lexicon(["cube", "CUBE", "Cube"])) == 1


def test_iteration_is_sorted(lexicon):
    words = list(lexicon)
    assert words == sorted(words)
    assert set(words) == {"boggle", "board", "cube", "cubes", "word"}


def test_contains_prefix(lexicon):
    assert lexicon.contains_prefix("bo")
    assert lexicon.contains_prefix("BOA")
    assert lexicon.contains_prefix("cubes")
    assert not lexicon.contains_prefix("cubesx")
    assert not lexicon.contains_prefix("x")


def test_empty_prefix_always_matches():
    assert Lexicon(["cube"]).contains_prefix("")
    assert Lexicon().contains_prefix("")


def test_every_word_is_its_own_prefix(lexicon):
    assert all(lexicon.contains_prefix(word) for word in lexicon)


def test_from_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Apple\nbanana\n\ncherry\n", encoding="utf-8")
    lexicon = Lexicon.from_file(path)
    assert list(lexicon) == ["apple", "banana", "cherry"]
    assert "APPLE" in lexicon


def test_from_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Lexicon.from_file(tmp_path / "absent.txt")