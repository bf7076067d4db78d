import pytest

from wolfcast.textfile import get_name, read_file, split_words


def test_split_simple_fields():
    assert split_words("a:b:c", ":") == ["a", "b", "c"]


def test_split_ignores_leading_separators():
    assert split_words("::map:weapon", ":") == ["map", "weapon"]


def test_split_collapses_separator_runs():
    assert split_words("a:::b", ":") == ["a", "b"]


def test_split_trailing_separator_gives_empty_word():
    words = split_words("a:b:", ":")
    assert words[:2] == ["a", "b"]
    assert words[-1] == ""
    assert len(words) == 3


def test_split_empty_text_gives_single_empty_word():
    assert split_words("", ":") == [""]


def test_split_only_separators():
    assert split_words(":::", ":") == [""]


def test_split_several_separator_characters():
    assert split_words("WWW\nW W#WWW", "\n#") == ["WWW", "W W", "WWW"]


def test_split_regex_special_characters_are_literal():
    assert split_words("a.b]c", ".]") == ["a", "b", "c"]


def test_split_without_separators_returns_text():
    assert split_words("abc", "") == ["abc"]


@pytest.mark.parametrize("text", ["map:content", "x", "one:two:three:four"])
def test_split_join_round_trip(text):
    assert ":".join(split_words(text, ":")) == text


def test_split_words_never_hold_separators():
    words = split_words("#map:\ncontent:\nWWW\nW W#weapon:\nammo:5", "#:\n")
    assert words == ["map", "content", "WWW", "W W", "weapon", "ammo", "5"]
    assert not any(set(word) & set("#:\n") for word in words)


def test_get_name_returns_following_field():
    fields = ["weapon", "\nammo", "12", "\nsound", "shot.ogg"]
    assert get_name("\nammo", fields) == "12"
    assert get_name("\nsound", fields) == "shot.ogg"


def test_get_name_missing_key():
    assert get_name("\nmusic", ["map", "\ncontent", "WWW"]) is None


def test_get_name_key_at_end():
    assert get_name("\nmusic", ["map", "\nmusic"]) is None


def test_get_name_first_match_wins():
    assert get_name("k", ["k", "first", "k", "second"]) == "first"


def test_read_file_round_trip(tmp_path):
    path = tmp_path / "level.wac"
    content = "#map:\ncontent:\nWWW\nWSW\nWDW\nWWW\n"
    path.write_text(content, encoding="utf-8")
    assert read_file(path) == content
    assert read_file(str(path)) == content


def test_read_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "absent.wac")


def test_read_file_empty(tmp_path):
    path = tmp_path / "empty.wac"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        read_file(path)