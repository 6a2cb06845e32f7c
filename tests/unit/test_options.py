"""Tests for thumbs option parsing and translation."""
from thumbswap.launcher import translate_options
from thumbswap.models.option import OptionKind, ThumbsOption, shell_quote


def translate(*lines):
    options = [ThumbsOption.parse(line) for line in lines]
    return translate_options([option for option in options if option is not None])


def test_boolean_option():
    assert translate("@thumbs-reverse true") == ["--reverse"]
    assert translate("@thumbs-unique enabled") == ["--unique"]
    assert translate("@thumbs-contrast 1") == ["--contrast"]


def test_string_option():
    assert translate("@thumbs-fg-color red") == ["--fg-color", "'red'"]
    assert translate('@thumbs-position "off_left"') == ["--position", "'off_left'"]
    assert translate("@thumbs-alphabet qwerty") == ["--alphabet", "'qwerty'"]


def test_regexp_option():
    """Double-quoted tmux values are unescaped before quoting for the shell."""
    assert translate('@thumbs-regexp-url "https?://\\\\S+"') == ["--regexp", "'https?://\\S+'"]
    assert translate("@thumbs-regexp-1 '[a-z]+@[a-z]+.com'") == ["--regexp", "'[a-z]+@[a-z]+.com'"]


def test_unrelated_lines_are_dropped():
    assert translate("status-left \"[#S] \"", "mouse on", "@plugin 'tmux-plugins/tpm'") == []
    assert translate("@thumbs-key F", "@thumbs-command 'tmux set-buffer {}'") == []


def test_order_is_preserved():
    flags = translate(
        "@thumbs-reverse enabled",
        "@thumbs-fg-color green",
        "@thumbs-regexp-1 foo",
        "@thumbs-unique enabled",
    )

    assert flags == ["--reverse", "--fg-color", "'green'", "--regexp", "'foo'", "--unique"]


def test_parse_non_option():
    assert ThumbsOption.parse("history-limit 2000") is None
    assert ThumbsOption.parse("") is None


def test_kind():
    assert ThumbsOption(name="reverse").kind is OptionKind.BOOLEAN
    assert ThumbsOption(name="hint-bg-color", value="black").kind is OptionKind.STRING
    assert ThumbsOption(name="regexp-sha", value="x").kind is OptionKind.REGEXP
    assert ThumbsOption(name="osc52", value="1").kind is None


def test_shell_quote_single_quote():
    assert shell_quote("it's") == "'it'\\''s'"
