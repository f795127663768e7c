from uuid import uuid4

from src.adapter.repositories.query_builder import (
    ARRAY,
    BOOLEAN,
    STRING,
    QueryableField,
    build_filters,
)
from src.domain.entities import Product, Tool

TOOL_FIELDS = [
    QueryableField("name", Tool.name, STRING, regex=True),
    QueryableField("active", Tool.is_active, BOOLEAN),
    QueryableField("deleted", Tool.is_deleted, BOOLEAN),
]


def test_defaults_to_active_non_deleted_rows():
    clauses = build_filters(Tool, TOOL_FIELDS, {})

    assert len(clauses) == 2
    assert clauses[0].compare(Tool.is_deleted == False)
    assert clauses[1].compare(Tool.is_active == True)


def test_name_is_case_insensitive_substring():
    clauses = build_filters(Tool, TOOL_FIELDS, {"name": "dri"})

    assert len(clauses) == 3
    assert clauses[2].compare(Tool.name.icontains("dri", autoescape=True))


def test_flags_override_defaults():
    clauses = build_filters(Tool, TOOL_FIELDS, {"deleted": "1", "active": 0})

    assert len(clauses) == 2
    assert clauses[0].compare(Tool.is_deleted == True)
    assert clauses[1].compare(Tool.is_active == False)


def test_unparseable_flag_keeps_default():
    clauses = build_filters(Tool, TOOL_FIELDS, {"deleted": "yes"})

    assert clauses[0].compare(Tool.is_deleted == False)


def test_unknown_parameters_are_ignored():
    clauses = build_filters(Tool, TOOL_FIELDS, {"colour": "red", "name": ""})

    assert len(clauses) == 2


def test_array_matches_any_id():
    ids = [uuid4(), uuid4()]
    fields = [QueryableField("manufacturer", Product.manufacturer_id, ARRAY)]

    clauses = build_filters(Product, fields, {"manufacturer": [str(i) for i in ids]})

    assert len(clauses) == 3
    assert clauses[2].compare(Product.manufacturer_id.in_(ids))


def test_empty_array_adds_no_clause():
    fields = [QueryableField("manufacturer", Product.manufacturer_id, ARRAY)]

    clauses = build_filters(Product, fields, {"manufacturer": None})

    assert len(clauses) == 2
