"""Quote handling and syntax checks on a raw input line."""

from typing import Optional

SPECIAL_CHARS = frozenset("|&;><")

_NEUTRAL_BASE = 0xE000
_NEUTRALIZABLE = SPECIAL_CHARS | {"$"}
_TOKEN_ERROR = "syntax error near unexpected token `{}'"
_EOF_ERROR = "bash: syntax error: unexpected end of file"


class ShellSyntaxError(Exception):
    """Raised for a malformed input line."""

    def __init__(self, message: str, token: Optional[str] = None) -> None:
        self.message = message
        self.token = token
        super().__init__(message)


def _token_error(char: str) -> ShellSyntaxError:
    return ShellSyntaxError(_TOKEN_ERROR.format(char), char)


def is_special_char(char: str) -> bool:
    """Return True for one of the operator characters | & ; > <."""
    return char in SPECIAL_CHARS if len(char) == 1 else False


def check_quotes_closed(text: str) -> None:
    """Raise ShellSyntaxError when double or single quotes are unbalanced."""
    if text.count('"') % 2:
        raise ShellSyntaxError("syntax error: unclosed double quote")
    if text.count("'") % 2:
        raise ShellSyntaxError("syntax error: unclosed single quote")


def _neutral(ch: str) -> str:
    return chr(_NEUTRAL_BASE + ord(ch))


def _neutralize(text: str, quote_char: str, targets: frozenset) -> str:
    result = []
    inside = False
    for ch in text:
        if ch == quote_char:
            inside = not inside
            result.append(ch)
        elif inside and ch in targets:
            result.append(_neutral(ch))
        else:
            result.append(ch)
    return "".join(result)


def neutralize_single_quoted(text: str) -> str:
    """Hide operator characters and '$' found between single quotes."""
    return _neutralize(text, "'", _NEUTRALIZABLE)


def neutralize_double_quoted(text: str) -> str:
    """Hide operator characters found between double quotes."""
    return _neutralize(text, '"', SPECIAL_CHARS)


def restore_neutralized(text: str) -> str:
    """Undo the neutralizing passes."""
    hidden = {_neutral(ch): ch for ch in _NEUTRALIZABLE}
    return "".join(hidden.get(ch, ch) for ch in text)


def check_pipe(text: str) -> None:
    """Raise ShellSyntaxError for a leading, trailing or doubled pipe."""
    if text.lstrip(" ").startswith("|"):
        raise _token_error("|")
    if text.endswith("|"):
        raise ShellSyntaxError(_EOF_ERROR)
    if "||" in text:
        raise _token_error("|")


def check_special_chars(text: str) -> None:
    """Raise ShellSyntaxError for a misplaced operator character.

    An operator may not open the line or end it (trailing spaces ignored),
    and two operators may not stand side by side.
    """
    leading = text.lstrip(" ")
    if leading and is_special_char(leading[0]):
        raise _token_error(leading[0])
    trailing = text.rstrip(" ")
    if trailing and is_special_char(trailing[-1]):
        raise ShellSyntaxError(_EOF_ERROR)
    for current, following in zip(text, text[1:]):
        if is_special_char(current) and is_special_char(following):
            raise _token_error(following)