"""Tests for rendering extracted documentation."""

import pytest

from restscribe.config import ScribeConfig
from restscribe.models import ExtractedEndpointData, HTTPMethod, Parameter
from restscribe.output import render, render_markdown, write_markdown


@pytest.fixture
def endpoint():
    def show():
        pass

    return ExtractedEndpointData(
        http_method=HTTPMethod.GET,
        uri="/posts/{post}",
        handler=show,
        title="Show a post.",
        url_parameters={
            "post": Parameter(name="post", type="integer", required=True, description="The post.", example=42)
        },
        query_parameters={
            "locale": Parameter(name="locale", description="The locale.", no_example=True)
        },
    )


class TestRender:
    def test_inline_template(self):
        assert render(inline="# {{ title }}", title="Blog API") == "# Blog API"

    def test_inline_template_escapes_by_default(self):
        assert render(inline="{{ value }}", value="<b>") == "&lt;b&gt;"

    def test_template_from_directory(self, tmp_path):
        (tmp_path / "page.md.j2").write_text("Hello {{ name }}")
        assert render(template="page.md.j2", package=str(tmp_path), name="docs") == "Hello docs"

    def test_requires_template_or_inline(self):
        with pytest.raises(ValueError):
            render()

    def test_unknown_package(self):
        with pytest.raises(ValueError):
            render(template="x.j2", package="no_such_templates_package_anywhere")


class TestRenderMarkdown:
    def test_contains_endpoint_and_parameters(self, endpoint):
        markdown = render_markdown([endpoint], ScribeConfig(title="Blog API", base_url="https://api.test"))

        assert markdown.startswith("# Blog API")
        assert "Base URL: `https://api.test`" in markdown
        assert "## Show a post." in markdown
        assert "`GET /posts/{post}`" in markdown
        assert "### URL Parameters" in markdown
        assert "| `post` | integer | yes | The post. | `42` |" in markdown
        assert "| `locale` | string | no | The locale. |  |" in markdown
        assert "### Body Parameters" not in markdown

    def test_errors_are_reported(self, endpoint):
        endpoint.extraction_errors.append("body_parameters: boom")
        markdown = render_markdown([endpoint])

        assert "Extraction was incomplete: body_parameters: boom" in markdown

    def test_custom_template_directory(self, endpoint, tmp_path):
        (tmp_path / "list.j2").write_text("{% for e in endpoints %}{{ e.method }} {{ e.uri }}{% endfor %}")
        assert render_markdown([endpoint], template="list.j2", package=str(tmp_path)) == "GET /posts/{post}"

    def test_write_markdown(self, endpoint, tmp_path):
        target = tmp_path / "docs" / "index.md"
        content = write_markdown([endpoint], str(target))

        assert target.read_text(encoding="utf-8") == content
