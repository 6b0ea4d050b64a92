from hscpy.lexer import tokenize
from hscpy.sketch import (
    ELEMENT_SHAPES,
    ArgumentKind,
    ElementData,
    FixedList,
    NoArgs,
    SingleArg,
    TokenCursor,
    VarList,
    lookup_shape,
    parse_element,
)


def cursor_for(text: str) -> TokenCursor:
    return TokenCursor(text, tokenize(text))


def argument_texts(cursor: TokenCursor, element: ElementData) -> list[str]:
    return [cursor.text(token) for token in element.arguments]


def test_grammar_table_shapes() -> None:
    assert ELEMENT_SHAPES["Data"] == VarList(ArgumentKind.BASE36, 1)
    assert ELEMENT_SHAPES["Pencil"] == VarList(ArgumentKind.BASE36, 1)
    assert ELEMENT_SHAPES["Brush"] == VarList(ArgumentKind.BASE36, 2)
    assert lookup_shape("Affine") == FixedList(ArgumentKind.NUMBER, 9)
    assert lookup_shape("Marker") == SingleArg(ArgumentKind.STRING)
    assert lookup_shape("Mask") is None


def test_variable_list_collects_arguments_between_brackets() -> None:
    cursor = cursor_for("Data: [abc, def ghi] Pencil: [x]")

    element = parse_element(cursor)

    assert element is not None
    assert element.type_name == "Data"
    assert argument_texts(cursor, element) == ["abc", "def", "ghi"]
    assert element.range.as_tuple() == (0, 20)
    assert cursor.position == 8
    assert cursor.diagnostics == []


def test_empty_variable_list_is_accepted() -> None:
    cursor = cursor_for("Pencil:[]")

    element = parse_element(cursor)

    assert element is not None
    assert element.arguments == ()


def test_fixed_list_requires_exact_count() -> None:
    cursor = cursor_for("Affine: [1, 0, 0, 0, 1, 0, 0, 0, 1]")
    element = parse_element(cursor)
    assert element is not None
    assert argument_texts(cursor, element) == ["1", "0", "0", "0", "1", "0", "0", "0", "1"]

    short = cursor_for("Affine: [1, 0, 0]")
    assert parse_element(short) is None
    assert [d.code for d in short.diagnostics] == ["SKETCH_ARGUMENT_COUNT_MISMATCH"]


def test_single_argument_takes_one_token() -> None:
    cursor = cursor_for("Marker: (hello there) Data: []")

    element = parse_element(cursor)

    assert element is not None
    assert argument_texts(cursor, element) == ["(hello there)"]
    assert cursor.position == 3


def test_single_argument_requires_colon_and_value() -> None:
    missing_colon = cursor_for("Marker (hi)")
    assert parse_element(missing_colon) is None
    assert [d.code for d in missing_colon.diagnostics] == ["SKETCH_ARGUMENT_COUNT_MISMATCH"]

    missing_value = cursor_for("Marker:")
    assert parse_element(missing_value) is None
    assert [d.code for d in missing_value.diagnostics] == ["SKETCH_ARGUMENT_COUNT_MISMATCH"]


def test_list_requires_colon_and_bracket() -> None:
    cursor = cursor_for("Data: abc")

    assert parse_element(cursor) is None
    assert [d.code for d in cursor.diagnostics] == ["SKETCH_ARGUMENT_COUNT_MISMATCH"]


def test_unknown_type_name_fails() -> None:
    cursor = cursor_for("Mask: [000000]")

    assert parse_element(cursor) is None
    diagnostic = cursor.diagnostics[0]
    assert diagnostic.code == "SKETCH_UNKNOWN_ELEMENT_TYPE"
    assert diagnostic.range.as_tuple() == (0, 4)
    assert "`Mask`" in diagnostic.message


def test_unclosed_list_fails() -> None:
    cursor = cursor_for("Data: [abc def")

    assert parse_element(cursor) is None
    assert [d.code for d in cursor.diagnostics] == ["SKETCH_UNTERMINATED_LIST"]


def test_odd_brush_argument_count_is_rejected() -> None:
    cursor = cursor_for("Brush: [05, 0000005f, 07]")

    assert parse_element(cursor) is None
    assert [d.code for d in cursor.diagnostics] == ["SKETCH_ARGUMENT_COUNT_MISMATCH"]


def test_no_argument_shape_consumes_only_the_name() -> None:
    shapes = {"Mask": NoArgs()}
    cursor = cursor_for("Mask Mask")

    element = parse_element(cursor, shapes)

    assert element is not None
    assert element.type_name == "Mask"
    assert element.arguments == ()
    assert cursor.position == 1


def test_single_argument_rejects_separators() -> None:
    for source in ("Marker:, Data:[000000]", "Marker:;", "Marker: ]"):
        cursor = cursor_for(source)
        assert parse_element(cursor) is None, source
        assert [d.code for d in cursor.diagnostics] == ["SKETCH_ARGUMENT_COUNT_MISMATCH"], source
        assert cursor.position == 2, source


def test_string_argument_must_be_a_string_token() -> None:
    cursor = cursor_for("Marker: hi")

    assert parse_element(cursor) is None
    diagnostic = cursor.diagnostics[0]
    assert diagnostic.code == "SKETCH_ARGUMENT_COUNT_MISMATCH"
    assert diagnostic.range.as_tuple() == (8, 10)


def test_list_arguments_must_match_argument_kind() -> None:
    data = cursor_for("Data: [000000 (note)]")
    assert parse_element(data) is None
    assert [d.code for d in data.diagnostics] == ["SKETCH_ARGUMENT_COUNT_MISMATCH"]

    affine = cursor_for("Affine: [1 0 0 : 1 0 0 0 1]")
    assert parse_element(affine) is None
    assert [d.code for d in affine.diagnostics] == ["SKETCH_ARGUMENT_COUNT_MISMATCH"]


def test_semicolon_inside_list_leaves_it_unclosed() -> None:
    cursor = cursor_for("Data: [000000; 111111]")

    assert parse_element(cursor) is None
    assert [d.code for d in cursor.diagnostics] == ["SKETCH_UNTERMINATED_LIST"]
