"""Splitting a command line into its arguments.

Words are separated by spaces and newlines. Single or double quotes group
a word that holds spaces, a backslash inside quotes escapes the next
character, and a word wholly enclosed in one kind of quote loses them.
Backslashes are then removed, each keeping the character it escapes.
"""

from __future__ import annotations

from typing import Iterable

from pipex.libft.search import strdup, strlen, strnstr

_QUOTES = "\"'"
_SEPARATORS = " \n"
_BLANK = " \t\n"


def count_words(text: str) -> int:
    """Number of words in ``text`` as the splitter counts them.

    Every space outside quotes ends a word, so runs of spaces count more
    than once. A backslash hides itself and the character after it. A
    quote left open at the end drops the last word.
    """
    count = 0
    inside_quotes = False
    chars = iter(strdup(text))
    for ch in chars:
        if ch == "\\":
            if next(chars, None) is None:
                break
            ch = next(chars, None)
            if ch is None:
                break
        if ch in _QUOTES:
            inside_quotes = not inside_quotes
        elif ch == " " and not inside_quotes:
            count += 1
    if not inside_quotes:
        count += 1
    return count


def remove_backslashes(word: str) -> str:
    """``word`` with each backslash replaced by the character it escapes.

    A backslash at the very end is kept.
    """
    out = []
    chars = iter(word)
    for ch in chars:
        if ch == "\\":
            ch = next(chars, ch)
        out.append(ch)
    return "".join(out)


def drop_blank(words: Iterable[str]) -> list[str]:
    """The words that hold something besides spaces, tabs and newlines."""
    return [word for word in words if word.strip(_BLANK)]


def is_script(cmd: str) -> bool:
    """True when the command names a shell script (contains ``.sh``)."""
    return strnstr(cmd, ".sh", strlen(cmd)) is not None


def _token_end(text: str, start: int) -> int:
    """Index just past the word that begins at ``start``."""
    size = len(text)
    end = start
    while end < size and text[end] not in _SEPARATORS:
        quote = text[end]
        if quote in _QUOTES:
            k = end + 1
            while k < size and text[k] != quote:
                if text[k] == "\\" and k + 1 < size:
                    k += 1
                k += 1
            end = min(k + 1, size)
        else:
            end += 1
    return end


def _unquote(word: str) -> str:
    if len(word) >= 2 and word[0] in "\"' " and word[-1] == word[0]:
        return word[1:-1]
    return word


def _tokens(text: str, limit: int) -> Iterable[str]:
    pos = 0
    for _ in range(limit):
        while pos < len(text) and text[pos] in _SEPARATORS:
            pos += 1
        end = _token_end(text, pos)
        yield text[pos:end]
        pos = end


def split_command(text: str) -> list[str]:
    """Split a command line into its arguments.

    An empty list means the line holds no command at all.
    """
    line = strdup(text)
    words = (_unquote(token) for token in _tokens(line, count_words(line)))
    return [remove_backslashes(word) for word in drop_blank(words)]