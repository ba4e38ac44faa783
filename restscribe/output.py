"""
Template rendering of extracted documentation.
"""

import os
from typing import Any, Iterable, Optional

from jinja2 import Environment, FileSystemLoader, PackageLoader, Template, select_autoescape
from jinja2.loaders import BaseLoader

from .config import ScribeConfig
from .models import ExtractedEndpointData

DEFAULT_TEMPLATE = "endpoints.md.j2"


def render(
    template: Optional[str] = None,
    package: str = "templates",
    unsafe: bool = False,
    inline: Optional[str] = None,
    **kwargs: Any
) -> str:
    """
    Render a template using Jinja2.

    Args:
        template: Path to the template file relative to ``package``.
                 Ignored if `inline` is provided.
        package: Directory path or importable package holding the templates.
                If it's a valid directory path, FileSystemLoader is used.
                Otherwise, PackageLoader is attempted.
        unsafe: If False (default), autoescape is enabled for HTML/XML templates.
        inline: Optional inline template string, rendered instead of a file.
        **kwargs: Variables to pass to the template context for rendering.

    Returns:
        The rendered template as a string.

    Examples:
        render(inline="# {{ title }}", title="Blog API")
        render(template="endpoints.md.j2", package="./docs/templates", endpoints=endpoints)
    """
    if inline:
        template_obj = Template(inline, autoescape=not unsafe, trim_blocks=True, lstrip_blocks=True)
        return template_obj.render(**kwargs)

    if not template:
        raise ValueError("Either 'template' or 'inline' parameter must be provided")

    loader: Optional[BaseLoader] = None
    if os.path.isdir(package):
        loader = FileSystemLoader(package)
    else:
        try:
            loader = PackageLoader(package)
        except (ImportError, ValueError, ModuleNotFoundError):
            # Neither a directory nor an importable package
            pass

    if loader is None:
        raise ValueError(f"Could not find template directory or package '{package}'.")

    try:
        env = Environment(  # nosec B701
            loader=loader,
            autoescape=select_autoescape() if not unsafe else False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        template_obj = env.get_template(template)
        return template_obj.render(**kwargs)
    except Exception as e:
        raise ValueError(
            f"Failed to load template '{template}' from package/directory '{package}'. "
            f"Original error: {str(e)}"
        )


def _builtin_loader_env() -> Environment:
    return Environment(  # nosec B701
        loader=PackageLoader("restscribe", "templates"),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_markdown(
    endpoints: Iterable[ExtractedEndpointData],
    config: Optional[ScribeConfig] = None,
    template: Optional[str] = None,
    package: Optional[str] = None,
) -> str:
    """Render endpoints as Markdown, with the bundled template unless one is given."""
    config = config or ScribeConfig()
    context = {
        "title": config.title,
        "base_url": config.base_url,
        "endpoints": [endpoint.to_dict() for endpoint in endpoints],
    }
    if template and package:
        return render(template=template, package=package, unsafe=True, **context)
    return _builtin_loader_env().get_template(template or DEFAULT_TEMPLATE).render(**context)


def write_markdown(
    endpoints: Iterable[ExtractedEndpointData],
    path: str,
    config: Optional[ScribeConfig] = None,
) -> str:
    """Render endpoints to ``path`` and return the rendered text."""
    content = render_markdown(endpoints, config)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(content)
    return content
