"""Tests for converting validation rules into parameters."""

import pytest

from restscribe.examples import ExampleGenerator
from restscribe.exceptions import RuleParsingError
from restscribe.models import Parameter
from restscribe.rules import (
    Rule,
    get_parameters_from_validation_rules,
    normalise_array_and_object_parameters,
    normalise_rules,
)


class Uppercase:
    def docs(self):
        return {"description": "Must be uppercase."}


class Opaque:
    pass


@pytest.fixture
def generator():
    return ExampleGenerator(seed=1)


class TestNormaliseRules:
    def test_pipe_string(self):
        assert normalise_rules("required|min:1|in:a,b") == [
            Rule("required"),
            Rule("min", ["1"]),
            Rule("in", ["a", "b"]),
        ]

    def test_regex_keeps_commas(self):
        assert normalise_rules(["regex:/^a{1,3}$/"]) == [Rule("regex", ["/^a{1,3}$/"])]

    def test_rule_objects(self):
        rules = normalise_rules(["string", Uppercase(), Opaque()])
        assert [rule.name for rule in rules] == ["string", "custom"]
        assert rules[1].docs == {"description": "Must be uppercase."}

    def test_unsupported_declaration(self):
        with pytest.raises(RuleParsingError):
            normalise_rules(42)


class TestGetParametersFromValidationRules:
    def test_types_and_required(self, generator):
        parameters = get_parameters_from_validation_rules(
            {
                "count": "required|integer",
                "price": "numeric",
                "active": ["boolean"],
                "avatar": "image",
                "name": "string|nullable",
            },
            generator=generator,
        )

        assert parameters["count"].type == "integer"
        assert parameters["count"].required is True
        assert parameters["price"].type == "number"
        assert parameters["active"].type == "boolean"
        assert parameters["avatar"].type == "file"
        assert parameters["name"].type == "string"
        assert parameters["name"].nullable is True
        assert parameters["name"].required is False

    def test_descriptions_from_rules(self, generator):
        parameters = get_parameters_from_validation_rules(
            {
                "email": "email",
                "title": "string|max:20",
                "age": "integer|min:18",
                "status": "in:draft,published",
                "code": ["string", Uppercase()],
            },
            generator=generator,
        )

        assert parameters["email"].description == "Must be a valid email address."
        assert parameters["title"].description == "Must not be greater than 20 characters."
        assert parameters["age"].description == "Must be at least 18."
        assert parameters["status"].description == "Must be one of `draft` or `published`."
        assert parameters["code"].description == "Must be uppercase."

    def test_custom_data_overrides(self, generator):
        parameters = get_parameters_from_validation_rules(
            {"title": "required|string", "slug": "string"},
            {
                "title": {"description": "The title.", "example": "Hello"},
                "slug": {"example": "No-example"},
            },
            generator,
        )

        assert parameters["title"].description == "The title."
        assert parameters["title"].example == "Hello"
        assert parameters["slug"].example is None
        assert parameters["slug"].no_example is True

    def test_generated_examples_respect_rules(self, generator):
        parameters = get_parameters_from_validation_rules(
            {
                "status": "in:draft,published",
                "email": "email",
                "age": "integer|between:18,30",
                "title": "string|max:3",
            },
            generator=generator,
        )

        assert parameters["status"].example in ("draft", "published")
        assert parameters["email"].example.endswith("@example.com")
        assert 18 <= parameters["age"].example <= 30
        assert len(parameters["title"].example) <= 3

    def test_maximum_below_default_lower_bound(self, generator):
        parameters = get_parameters_from_validation_rules(
            {"offset": "integer|max:0", "depth": "integer|max:-5", "ratio": "numeric|max:-1"},
            generator=generator,
        )

        assert parameters["offset"].example <= 0
        assert parameters["depth"].example <= -5
        assert parameters["ratio"].example <= -1

    def test_seeded_examples_are_reproducible(self):
        rules = {"name": "string", "count": "integer"}
        first = get_parameters_from_validation_rules(rules, generator=ExampleGenerator(seed=7))
        second = get_parameters_from_validation_rules(rules, generator=ExampleGenerator(seed=7))

        assert first == second

    def test_array_with_named_children_is_object(self, generator):
        parameters = get_parameters_from_validation_rules(
            {"meta": "array", "meta.tag": "string"}, generator=generator
        )
        assert parameters["meta"].type == "object"


class TestNormaliseArrayAndObjectParameters:
    def test_star_child_folds_into_parent(self):
        parameters = {
            "tags": Parameter(name="tags", type="array", example=["x"]),
            "tags.*": Parameter(name="tags.*", type="integer", example=3),
        }
        result = normalise_array_and_object_parameters(parameters)

        assert list(result) == ["tags"]
        assert result["tags"].type == "integer[]"
        assert result["tags"].example == [3]

    def test_array_of_objects(self):
        parameters = {
            "items.*.id": Parameter(name="items.*.id", type="integer", example=5),
            "items.*.qty": Parameter(name="items.*.qty", type="integer", example=2),
        }
        result = normalise_array_and_object_parameters(parameters)

        assert list(result) == ["items", "items.*.id", "items.*.qty"]
        assert result["items"].type == "object[]"
        assert result["items"].example == [{"id": 5, "qty": 2}]

    def test_object_parent_created(self):
        parameters = {"meta.tag": Parameter(name="meta.tag", type="string", example="news")}
        result = normalise_array_and_object_parameters(parameters)

        assert list(result) == ["meta", "meta.tag"]
        assert result["meta"].type == "object"
        assert result["meta"].example == {"tag": "news"}

    def test_explicit_star_parent_with_fields_is_removed(self):
        parameters = {
            "items": Parameter(name="items", type="array", required=True),
            "items.*": Parameter(name="items.*", type="array"),
            "items.*.id": Parameter(name="items.*.id", type="integer", example=1),
        }
        result = normalise_array_and_object_parameters(parameters)

        assert list(result) == ["items", "items.*.id"]
        assert result["items"].type == "object[]"
        assert result["items"].required is True

    def test_input_is_not_mutated(self):
        parameters = {
            "tags": Parameter(name="tags", type="array"),
            "tags.*": Parameter(name="tags.*", type="string", example="a"),
        }
        normalise_array_and_object_parameters(parameters)

        assert parameters["tags"].type == "array"
        assert "tags.*" in parameters
