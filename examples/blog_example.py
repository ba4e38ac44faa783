#!/usr/bin/env python3
"""
Documenting a small blog API with restscribe.

This example demonstrates:
- Form requests declaring rules, body and query parameter metadata
- A form request whose rules depend on the post bound to the route
- @urlParam examples used to bind route placeholders while extracting
- Rendering the extracted documentation as Markdown
"""

import logging

from pydantic import BaseModel

from restscribe import Container, Extractor, FormRequest, Router, ScribeConfig, render_markdown


class Post(BaseModel):
    id: int
    title: str
    locked: bool = False

    @classmethod
    def resolve_route_binding(cls, value):
        return posts_db[int(value)]


posts_db = {
    42: Post(id=42, title="Hello", locked=False),
    7: Post(id=7, title="Archived", locked=True),
}


class Clock:
    """A service the form request needs from the container."""

    def year(self) -> int:
        return 2026


class UpdatePostRequest(FormRequest):
    def __init__(self, clock: Clock):
        super().__init__()
        self.clock = clock

    def rules(self):
        post = self.route("post")
        rules = {
            "title": "required|string|max:120",
            "tags": "array",
            "tags.*": "string",
            "published_year": f"integer|between:2000,{self.clock.year()}",
        }
        if post is not None and post.locked:
            rules["unlock_reason"] = "required|string"
        return rules

    def body_parameters(self):
        return {
            "title": {"description": "The new title.", "example": "Hello again"},
            "tags": {"description": "Tags to attach."},
            "published_year": {"description": "Year of first publication.", "example": 2024},
        }


class ListPostsRequest(FormRequest):
    def rules(self):
        return {"page": "integer|min:1", "sort": "in:newest,oldest"}

    def query_parameters(self):
        return {
            "page": {"description": "Page to fetch.", "example": 1},
            "sort": {"description": "Sort order."},
        }


router = Router()


@router.get("/posts")
def list_posts(request: ListPostsRequest):
    """List posts."""


@router.put("/posts/{post}", where={"post": r"\d+"})
def update_post(request: UpdatePostRequest, post: Post):
    """
    Update a post.

    Locked posts need a reason to be unlocked.

    @urlParam post integer required The post to update. Example: 7
    """


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    container = Container()
    container.instance(Clock, Clock())

    config = ScribeConfig.from_env(title="Blog API", example_seed=1234)
    extractor = Extractor(config, container)
    endpoints = extractor.extract_router(router)

    print(render_markdown(endpoints, config))
