"""
Parsing of handler docstrings into a summary, a description and ``@tags``.
"""

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional


@dataclass
class Tag:
    """A single ``@name content`` annotation."""

    name: str
    content: str = ""


@dataclass
class DocBlock:
    summary: str = ""
    description: str = ""
    tags: List[Tag] = field(default_factory=list)

    def get_tags(self, name: Optional[str] = None) -> List[Tag]:
        if name is None:
            return list(self.tags)
        return [tag for tag in self.tags if tag.name == name]


def parse_docblock(text: Optional[str]) -> DocBlock:
    """Parse a docstring.

    The first paragraph is the summary, the text up to the first tag is the
    description, and every line starting with ``@`` opens a tag. Indented or
    plain lines following a tag are appended to it.
    """
    if not text:
        return DocBlock()

    lines = inspect.cleandoc(text).splitlines()
    prose: List[str] = []
    tags: List[Tag] = []

    for raw_line in lines:
        line = raw_line.strip()
        if line.startswith("@"):
            name, _, content = line[1:].partition(" ")
            tags.append(Tag(name=name, content=content.strip()))
        elif tags:
            if line:
                current = tags[-1]
                current.content = f"{current.content} {line}".strip()
        else:
            prose.append(line)

    paragraphs = "\n".join(prose).strip().split("\n\n")
    summary = " ".join(paragraphs[0].split()) if paragraphs else ""
    description = "\n\n".join(p.strip() for p in paragraphs[1:]).strip()
    return DocBlock(summary=summary, description=description, tags=tags)


def get_doc_blocks_from_route(route: Any) -> Dict[str, DocBlock]:
    """Return the parsed docstrings of a route's handler and its owning class."""
    handler: Callable = route.handler
    owner = getattr(handler, "__self__", None)
    owner_class = owner if inspect.isclass(owner) else type(owner) if owner is not None else None
    return {
        "method": parse_docblock(inspect.getdoc(handler)),
        "class": parse_docblock(inspect.getdoc(owner_class)) if owner_class is not None else DocBlock(),
    }
