from hscpy.lexer import Lexer, TokenFlags, TokenKind, dump_tokens, token_text, tokenize


def lex_texts(text: str) -> list[str]:
    return [token_text(text, token) for token in tokenize(text)]


def test_comment_is_dropped_and_lexing_stops_at_semicolon() -> None:
    source = "% comment\nData: [abc];"

    assert lex_texts(source) == ["Data", ":", "[", "abc", "]", ";"]


def test_text_after_semicolon_is_never_scanned() -> None:
    assert lex_texts("Data:[a]; Pencil:[b]") == ["Data", ":", "[", "a", "]", ";"]
    assert lex_texts("Marker:(a);(never closed") == ["Marker", ":", "(a)", ";"]


def test_operator_token_kinds() -> None:
    tokens = tokenize(":[],;")

    assert [token.kind for token in tokens] == [
        TokenKind.COLON,
        TokenKind.LBRACKET,
        TokenKind.RBRACKET,
        TokenKind.COMMA,
        TokenKind.SEMICOLON,
    ]
    assert all(token.kind.is_operator for token in tokens)


def test_word_is_flushed_before_operator() -> None:
    tokens = tokenize("Data:[abc,def]")

    assert [token.kind for token in tokens] == [
        TokenKind.WORD,
        TokenKind.COLON,
        TokenKind.LBRACKET,
        TokenKind.WORD,
        TokenKind.COMMA,
        TokenKind.WORD,
        TokenKind.RBRACKET,
    ]


def test_tokens_are_ranges_into_the_source() -> None:
    source = "Data:[abc]"
    tokens = Lexer(source).lex()

    assert tokens[3].range.as_tuple() == (6, 9)
    assert token_text(source, tokens[3]) == "abc"


def test_percent_only_starts_a_comment_at_line_start() -> None:
    assert lex_texts("Data:[a%b]") == ["Data", ":", "[", "a%b", "]"]
    assert lex_texts("  % not a comment") == ["%", "not", "a", "comment"]
    assert lex_texts("Data:[a]\n% trailing comment\n") == ["Data", ":", "[", "a", "]"]


def test_comment_ends_at_crlf() -> None:
    assert lex_texts("% first\r\n% second\r\nData") == ["Data"]


def test_nested_string_keeps_delimiters() -> None:
    source = "Marker:(a (b) c)"
    tokens = tokenize(source)

    assert lex_texts(source) == ["Marker", ":", "(a (b) c)"]
    assert tokens[2].kind == TokenKind.STRING


def test_string_swallows_operators_and_newlines() -> None:
    assert lex_texts("Marker:(a;\nb, [c]);") == ["Marker", ":", "(a;\nb, [c])", ";"]


def test_unterminated_string_is_emitted_at_end_of_input() -> None:
    source = "Marker:(a (b)"
    tokens = tokenize(source)

    assert lex_texts(source) == ["Marker", ":", "(a (b)"]
    assert tokens[-1].kind == TokenKind.STRING
    assert tokens[-1].range.as_tuple() == (7, 13)
    assert tokens[-1].is_unterminated()
    assert tokens[-1].flags == TokenFlags.UNTERMINATED


def test_closed_strings_are_not_flagged() -> None:
    tokens = tokenize("Marker:(a (b) c) word")

    assert not any(token.is_unterminated() for token in tokens)


def test_adjacent_strings_and_words() -> None:
    assert lex_texts("(a)(b)") == ["(a)", "(b)"]
    assert lex_texts("ab(cd)") == ["ab", "(cd)"]
    assert [token.kind for token in tokenize("ab(cd))")] == [TokenKind.WORD, TokenKind.STRING, TokenKind.WORD]


def test_empty_and_blank_sources_produce_no_tokens() -> None:
    assert tokenize("") == []
    assert tokenize(" \t\r\n ") == []
    assert tokenize("% only a comment") == []


def test_dump_tokens_lists_kind_range_and_text() -> None:
    source = "Data:[a];"
    lines = dump_tokens(tokenize(source), source)

    assert len(lines) == 6
    assert lines[0].startswith("000 WORD")
    assert "range=(0, 4)" in lines[0]
    assert "flags=0" in lines[0]
    assert "text='Data'" in lines[0]
    assert lines[-1].startswith("005 SEMICOLON")
