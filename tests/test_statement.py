"""Tests for the statement builder."""

from routegen.statement import (
    COLLECTION_FORMAT,
    EnumConstant,
    Fragment,
    Literal,
    Quoted,
    StatementBuilder,
    literal_text,
)


def _fragments(builder: StatementBuilder) -> list[Fragment]:
    return list(builder.build().fragments)


class TestSingleValueAppends:
    """Each append kind emits one fragment or nothing."""

    def test_boolean_true(self):
        b = StatementBuilder()
        b.append_boolean("required", True)
        assert _fragments(b) == [Fragment(".required({})", (Literal("true"),))]

    def test_boolean_false_still_emitted(self):
        b = StatementBuilder()
        b.append_boolean("required", False)
        assert _fragments(b) == [Fragment(".required({})", (Literal("false"),))]

    def test_boolean_none_skipped(self):
        b = StatementBuilder()
        b.append_boolean("required", None)
        assert _fragments(b) == []

    def test_enum(self):
        b = StatementBuilder()
        b.append_enum("collectionFormat", COLLECTION_FORMAT, "csv")
        assert _fragments(b) == [
            Fragment(".collectionFormat({})", (EnumConstant(COLLECTION_FORMAT, "csv"),)),
        ]

    def test_enum_empty_skipped(self):
        b = StatementBuilder()
        b.append_enum("collectionFormat", COLLECTION_FORMAT, "")
        b.append_enum("collectionFormat", COLLECTION_FORMAT, None)
        assert _fragments(b) == []

    def test_object_is_raw_literal(self):
        b = StatementBuilder()
        b.append_object("defaultValue", 20)
        assert _fragments(b) == [Fragment(".defaultValue({})", (Literal("20"),))]

    def test_object_zero_is_emitted(self):
        """Only None counts as absent for object values."""
        b = StatementBuilder()
        b.append_object("defaultValue", 0)
        assert _fragments(b) == [Fragment(".defaultValue({})", (Literal("0"),))]

    def test_object_none_skipped(self):
        b = StatementBuilder()
        b.append_object("defaultValue", None)
        assert _fragments(b) == []

    def test_string_is_quoted(self):
        b = StatementBuilder()
        b.append_string("name", "id")
        assert _fragments(b) == [Fragment(".name({})", (Quoted("id"),))]

    def test_string_empty_skipped(self):
        b = StatementBuilder()
        b.append_string("name", "")
        b.append_string("name", None)
        assert _fragments(b) == []


class TestCompositeAppends:
    """Joined and vararg helpers."""

    def test_joined(self):
        b = StatementBuilder()
        b.append_joined("produces", ["application/json", "application/xml"])
        assert _fragments(b) == [
            Fragment(".produces({})", (Quoted("application/json,application/xml"),)),
        ]

    def test_joined_empty_skipped(self):
        b = StatementBuilder()
        b.append_joined("consumes", [])
        b.append_joined("consumes", None)
        assert _fragments(b) == []

    def test_varargs_one_placeholder_per_value(self):
        b = StatementBuilder()
        b.append_varargs("allowableValues", ["a", "b"])
        assert _fragments(b) == [
            Fragment(".allowableValues({}, {})", (Quoted("a"), Quoted("b"))),
        ]

    def test_varargs_stringifies_values(self):
        b = StatementBuilder()
        b.append_varargs("allowableValues", [1, True])
        (fragment,) = _fragments(b)
        assert fragment.arguments == (Quoted("1"), Quoted("true"))

    def test_varargs_empty_skipped(self):
        b = StatementBuilder()
        b.append_varargs("allowableValues", ())
        b.append_varargs("allowableValues", None)
        assert _fragments(b) == []


class TestBuilder:
    def test_initial_template(self):
        b = StatementBuilder("rest.{}({})", Literal("get"), Quoted("/pets"))
        assert _fragments(b) == [Fragment("rest.{}({})", (Literal("get"), Quoted("/pets")))]

    def test_order_preserved(self):
        b = StatementBuilder()
        b.append_string("id", "x")
        b.append_raw(".param()")
        b.append_boolean("required", True)
        assert [f.template for f in _fragments(b)] == [".id({})", ".param()", ".required({})"]

    def test_literal_text(self):
        assert literal_text(True) == "true"
        assert literal_text(False) == "false"
        assert literal_text(1.5) == "1.5"
        assert literal_text("abc") == "abc"
