import pytest

from fhetoolkit.string_reverse import MAX_LENGTH, main, reverse_string, str_len


def test_reverse_sample():
    assert reverse_string("abcd") == "dcba"


@pytest.mark.parametrize("text", ["a", "ab", "abc", "abcdefg"])
def test_reverse_twice_is_identity(text):
    assert reverse_string(reverse_string(text)) == text


@pytest.mark.parametrize("text", ["a", "abc", "abcdefg"])
def test_str_len_of_short_text(text):
    assert str_len(text) == len(text)


def test_str_len_stops_at_nul():
    text = "abc\0xyz"
    assert str_len(text) == text.index("\0")


def test_str_len_capped():
    assert str_len("z" * 20) == MAX_LENGTH


def test_reverse_keeps_text_after_nul():
    text = "abc\0xyz"
    result = reverse_string(text)
    assert result[3:] == text[3:]
    assert sorted(result[:3]) == sorted(text[:3])


def test_reverse_only_touches_buffer():
    text = "abcdefghijkl"
    result = reverse_string(text)
    assert result[MAX_LENGTH:] == text[MAX_LENGTH:]
    assert result[:MAX_LENGTH] == text[:MAX_LENGTH][::-1]


def test_main_prints_result(capsys):
    assert main([]) == 0
    assert "Result: dcba" in capsys.readouterr().out