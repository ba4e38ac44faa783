"""
Shared fixtures: a bindable model and a route/handler factory.
"""

import pytest
from pydantic import BaseModel

from restscribe.models import HTTPMethod
from restscribe.router import Route


class Post(BaseModel):
    """A model that can be bound from a route placeholder."""

    id: int
    title: str = "A post"

    @classmethod
    def resolve_route_binding(cls, value):
        return cls(id=int(value), title=f"Post {value}")


class Comment(BaseModel):
    id: int

    @classmethod
    def resolve_route_binding(cls, value):
        return cls(id=int(value))


@pytest.fixture
def make_route():
    """Build a route for a handler without going through a router."""

    def _make(path, handler, method=HTTPMethod.GET, wheres=None):
        return Route(method, path, handler, wheres)

    return _make


@pytest.fixture
def post_model():
    return Post


@pytest.fixture
def comment_model():
    return Comment
