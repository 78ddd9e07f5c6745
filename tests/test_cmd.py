"""Test cmd-style quoting: double quotes toggle, backslashes are literal."""


class TestUnquoted:
    def test_backslashes_are_literal(self, cmd):
        assert cmd(r"arg1 arg\2 arg3\ arg4  arg5") == [
            (range(0, 4), "arg1"),
            (range(5, 10), "arg\\2"),
            (range(11, 16), "arg3\\"),
            (range(17, 21), "arg4"),
            (range(23, 27), "arg5"),
        ]

    def test_single_quotes_are_literal(self, cmd):
        assert cmd("'a b'") == [(range(0, 2), "'a"), (range(3, 5), "b'")]

    def test_windows_path(self, cmd):
        assert cmd(r"dir C:\Users\me") == [
            (range(0, 3), "dir"),
            (range(4, 15), "C:\\Users\\me"),
        ]


class TestQuoting:
    def test_quoted_arguments(self, cmd):
        assert cmd(r'"arg 1" "arg "2 "arg\3"') == [
            (range(0, 7), "arg 1"),
            (range(8, 15), "arg 2"),
            (range(16, 23), "arg\\3"),
        ]

    def test_adjacent_quoted_segments(self, cmd):
        assert cmd('cmd "a""b"') == [(range(0, 3), "cmd"), (range(4, 10), "ab")]

    def test_quoted_space_glues_words(self, cmd):
        assert cmd('my" "file') == [(range(0, 9), "my file")]

    def test_backslash_does_not_escape_quote(self, cmd):
        assert cmd(r'"arg\"5"') == [(range(0, 8), "arg\\5")]

    def test_empty_quotes(self, cmd):
        assert cmd('a "" b') == [
            (range(0, 1), "a"),
            (range(2, 4), ""),
            (range(5, 6), "b"),
        ]


class TestMalformed:
    def test_unterminated_quote(self, cmd):
        assert cmd('"a') == [(range(0, 2), "a")]

    def test_unterminated_quote_with_space(self, cmd):
        assert cmd('copy "my file') == [(range(0, 4), "copy"), (range(5, 13), "my file")]

    def test_empty_input(self, cmd):
        assert cmd("") == []

    def test_whitespace_only(self, cmd):
        assert cmd(" \t\r\n") == []
