import pytest

from pipex.libft.search import (
    strchr,
    strcmp,
    strdup,
    strlen,
    strncmp,
    strndup,
    strnstr,
    strrchr,
    substr,
)

SAMPLES = ["", "a", "hello", "banana", "/usr/bin:/bin", "PATH=/bin"]


@pytest.mark.parametrize("s", SAMPLES)
def test_strlen_matches_len(s):
    assert strlen(s) == len(s)


def test_strlen_stops_at_nul_and_accepts_none():
    assert strlen("abc\0def") == strlen("abc")
    assert strlen(None) == 0


@pytest.mark.parametrize("s", ["banana", "hello", "/usr/bin"])
@pytest.mark.parametrize("c", ["a", "l", "/", "n"])
def test_strchr_finds_first(s, c):
    index = strchr(s, c)
    if c in s:
        assert s[index] == c
        assert c not in s[:index]
    else:
        assert index is None


@pytest.mark.parametrize("s", ["banana", "hello", "/usr/bin"])
@pytest.mark.parametrize("c", ["a", "l", "/", "n"])
def test_strrchr_finds_last(s, c):
    index = strrchr(s, c)
    if c in s:
        assert s[index] == c
        assert c not in s[index + 1:]
    else:
        assert index is None


def test_nul_search_gives_terminator():
    assert strchr("hello", "\0") == len("hello")
    assert strrchr("hello", 0) == len("hello")


def test_strchr_none_string():
    assert strchr(None, "a") is None


def test_strchr_integer_code():
    assert strchr("banana", ord("n")) == strchr("banana", "n")


def test_strchr_rejects_long_string():
    with pytest.raises(TypeError):
        strchr("banana", "an")


@pytest.mark.parametrize("s", SAMPLES)
def test_strcmp_equal_is_zero(s):
    assert strcmp(s, strdup(s)) == 0


def test_strcmp_orders_and_is_antisymmetric():
    assert strcmp("abc", "abd") < 0
    assert strcmp("abd", "abc") > 0
    assert strcmp("ab", "abc") < 0
    assert strcmp("abc", "abd") == -strcmp("abd", "abc")


def test_strcmp_difference_of_characters():
    assert strcmp("a", "b") == ord("a") - ord("b")
    assert strcmp("abc", "ab") == ord("c")


def test_strncmp_prefix_only():
    assert strncmp("PATH=/bin", "PATH=", 5) == 0
    assert strncmp("PATHS", "PATH=", 5) != 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_matches_strcmp_for_large_n():
    for a, b in [("abc", "abd"), ("ab", "abc"), ("same", "same")]:
        assert strncmp(a, b, 100) == strcmp(a, b)


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strdup_copies_up_to_nul():
    assert strdup("hello") == "hello"
    assert strdup("ab\0cd") == strdup("ab")


@pytest.mark.parametrize("n", [0, 1, 3, 10])
def test_strndup_length_bound(n):
    result = strndup("hello", n)
    assert len(result) == min(n, len("hello"))
    assert "hello".startswith(result)


def test_strndup_negative():
    with pytest.raises(ValueError):
        strndup("hello", -2)


def test_strnstr_empty_needle():
    assert strnstr("hello", "", 3) == 0
    assert strnstr("hello", None, 3) == 0


def test_strnstr_finds_within_limit():
    cmd = "script.sh"
    index = strnstr(cmd, ".sh", len(cmd))
    assert cmd[index:index + 3] == ".sh"
    assert strnstr(cmd, ".sh", len(cmd) - 1) is None


def test_strnstr_missing():
    assert strnstr("grep banana", ".sh", len("grep banana")) is None


@pytest.mark.parametrize("start", [0, 1, 4])
@pytest.mark.parametrize("length", [0, 2, 50])
def test_substr_is_slice_of_source(start, length):
    s = "pipex"
    result = substr(s, start, length)
    assert len(result) == max(0, min(length, len(s) - start))
    assert s.find(result, start) == start or result == ""


def test_substr_past_end_and_none():
    assert substr("abc", 3, 5) == ""
    assert substr("abc", 10, 1) == ""
    assert substr(None, 0, 1) is None


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_substr_whole_round_trip():
    s = "/usr/bin:/bin"
    assert substr(s, 0, strlen(s)) == s