"""Tests for docstring parsing and @urlParam tags."""

from restscribe.docblock import Tag, get_doc_blocks_from_route, parse_docblock
from restscribe.strategies.url_params import cast_example, get_url_parameters_from_docblock, parse_url_param_tag


class TestParseDocblock:
    def test_empty_docstring(self):
        docblock = parse_docblock(None)
        assert docblock.summary == ""
        assert docblock.tags == []

    def test_summary_description_and_tags(self):
        docblock = parse_docblock(
            """
            Show a post.

            Returns the post with its comments.

            @urlParam post integer required The post. Example: 42
            @group Posts
            """
        )

        assert docblock.summary == "Show a post."
        assert docblock.description == "Returns the post with its comments."
        assert [tag.name for tag in docblock.tags] == ["urlParam", "group"]
        assert docblock.get_tags("group") == [Tag(name="group", content="Posts")]

    def test_continuation_lines_join_previous_tag(self):
        docblock = parse_docblock(
            """
            @urlParam post The post
              to show. Example: 3
            """
        )
        assert docblock.tags[0].content == "post The post to show. Example: 3"

    def test_doc_blocks_from_route_reads_handler_and_owner(self, make_route):
        class PostController:
            """Manage posts."""

            def show(self):
                """Show a post."""

        handler = PostController().show
        blocks = get_doc_blocks_from_route(make_route("/posts", handler))

        assert blocks["method"].summary == "Show a post."
        assert blocks["class"].summary == "Manage posts."


class TestUrlParamTag:
    def test_full_tag(self):
        assert parse_url_param_tag("post integer required The post to show. Example: 42") == {
            "name": "post",
            "type": "integer",
            "description": "The post to show.",
            "required": True,
            "example": 42,
            "no_example": False,
        }

    def test_type_is_optional(self):
        parsed = parse_url_param_tag("slug The post slug. Example: hello-world")
        assert parsed["type"] == "string"
        assert parsed["required"] is False
        assert parsed["example"] == "hello-world"
        assert parsed["description"] == "The post slug."

    def test_capitalised_description_word_is_not_a_type(self):
        parsed = parse_url_param_tag("id Object identifier of the post. Example: 5")
        assert parsed["type"] == "string"
        assert parsed["description"] == "Object identifier of the post."
        assert parsed["example"] == "5"

    def test_missing_example_is_none(self):
        parsed = parse_url_param_tag("post int The post.")
        assert parsed["type"] == "integer"
        assert parsed["example"] is None
        assert parsed["no_example"] is False

    def test_no_example_marker(self):
        parsed = parse_url_param_tag("locale The locale. No-example")
        assert parsed["example"] is None
        assert parsed["no_example"] is True
        assert parsed["description"] == "The locale."

    def test_empty_tag_is_ignored(self):
        assert parse_url_param_tag("   ") is None

    def test_only_url_param_tags_are_collected(self):
        tags = [
            Tag("urlParam", "post integer Example: 1"),
            Tag("queryParam", "page integer"),
            Tag("urlparam", "comment integer Example: 2"),
        ]
        parameters = get_url_parameters_from_docblock(tags)

        assert set(parameters) == {"post", "comment"}
        assert parameters["post"]["example"] == 1


class TestCastExample:
    def test_integer(self):
        assert cast_example("42", "integer") == 42

    def test_number(self):
        assert cast_example("4.5", "number") == 4.5

    def test_boolean(self):
        assert cast_example("false", "boolean") is False

    def test_unconvertible_value_kept(self):
        assert cast_example("abc", "integer") == "abc"
