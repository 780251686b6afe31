import pytest

from minishell.syntax import (
    ShellSyntaxError,
    check_pipe,
    check_quotes_closed,
    check_special_chars,
    is_special_char,
    neutralize_double_quoted,
    neutralize_single_quoted,
    restore_neutralized,
)


@pytest.mark.parametrize("char", ["|", "&", ";", ">", "<"])
def test_special_chars(char):
    assert is_special_char(char) is True


@pytest.mark.parametrize("char", ["a", " ", "$", "'", '"', ""])
def test_not_special_chars(char):
    assert is_special_char(char) is False


def test_balanced_quotes_pass():
    assert check_quotes_closed("echo \"a\" 'b'") is None


def test_unclosed_double_quote():
    with pytest.raises(ShellSyntaxError) as info:
        check_quotes_closed('echo "abc')
    assert info.value.message == "syntax error: unclosed double quote"


def test_unclosed_single_quote():
    with pytest.raises(ShellSyntaxError) as info:
        check_quotes_closed("echo 'abc")
    assert info.value.message == "syntax error: unclosed single quote"


def test_double_quote_checked_first():
    with pytest.raises(ShellSyntaxError) as info:
        check_quotes_closed("\"'")
    assert "double" in info.value.message


def test_neutralize_double_hides_specials_inside_only():
    text = 'a | "b | c" ; d'
    result = neutralize_double_quoted(text)
    inside = result[result.index('"') + 1:result.rindex('"')]
    assert not any(is_special_char(ch) for ch in inside)
    assert result[:4] == "a | "
    assert result[-4:] == " ; d"
    assert len(result) == len(text)


def test_neutralize_double_keeps_dollar():
    assert neutralize_double_quoted('"$HOME"') == '"$HOME"'


def test_neutralize_single_hides_dollar_and_specials():
    text = "echo '$HOME | x' $USER"
    result = neutralize_single_quoted(text)
    inside = result[result.index("'") + 1:result.rindex("'")]
    assert "$" not in inside
    assert "|" not in inside
    assert result.endswith("$USER")


@pytest.mark.parametrize(
    "text",
    ["echo 'a|b' \"c>d\" e", "ls | wc", "'$;&<>|'", '"|"\'|\'', ""],
)
def test_restore_round_trip(text):
    hidden = neutralize_single_quoted(neutralize_double_quoted(text))
    assert restore_neutralized(hidden) == text


def test_neutralized_line_passes_special_check():
    text = "echo '||' \">>\""
    with pytest.raises(ShellSyntaxError):
        check_special_chars(text)
    hidden = neutralize_single_quoted(neutralize_double_quoted(text))
    assert check_special_chars(hidden) is None


def test_check_pipe_leading():
    with pytest.raises(ShellSyntaxError) as info:
        check_pipe("   | ls")
    assert info.value.message == "syntax error near unexpected token `|'"


def test_check_pipe_trailing():
    with pytest.raises(ShellSyntaxError) as info:
        check_pipe("ls |")
    assert info.value.message == "bash: syntax error: unexpected end of file"


def test_check_pipe_double():
    with pytest.raises(ShellSyntaxError) as info:
        check_pipe("ls || wc")
    assert info.value.token == "|"


def test_check_pipe_valid():
    assert check_pipe("ls | wc -l") is None
    assert check_pipe("") is None


def test_special_leading_reports_char():
    with pytest.raises(ShellSyntaxError) as info:
        check_special_chars("  ; ls")
    assert info.value.message == "syntax error near unexpected token `;'"
    assert info.value.token == ";"


def test_special_trailing_with_spaces():
    with pytest.raises(ShellSyntaxError) as info:
        check_special_chars("ls >   ")
    assert info.value.message == "bash: syntax error: unexpected end of file"


def test_special_adjacent_reports_second():
    with pytest.raises(ShellSyntaxError) as info:
        check_special_chars("ls |& wc")
    assert info.value.token == "&"


@pytest.mark.parametrize("text", ["ls | wc", "echo a > f", "   ", "", "a ; b"])
def test_special_valid(text):
    assert check_special_chars(text) is None