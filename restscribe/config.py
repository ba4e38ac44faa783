"""
Configuration for a documentation run.
"""

import os
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel, Field

DEFAULT_STRATEGIES: Dict[str, List[str]] = {
    "url_parameters": [
        "restscribe.strategies.url_params.GetFromUrlPath",
        "restscribe.strategies.url_params.GetFromUrlParamTag",
    ],
    "query_parameters": [
        "restscribe.strategies.query_params.GetFromQueryParamsFormRequest",
    ],
    "body_parameters": [
        "restscribe.strategies.body_params.GetFromBodyParamsFormRequest",
    ],
}


class ScribeConfig(BaseModel):
    """Settings shared by every strategy during a documentation run."""

    title: str = "API Documentation"
    base_url: str = "http://localhost"
    example_seed: Optional[int] = Field(
        default=None, description="Seed for generated examples, for reproducible output"
    )
    warn_on_missing_custom_data: bool = True
    strategies: Dict[str, List[str]] = Field(default_factory=lambda: {k: list(v) for k, v in DEFAULT_STRATEGIES.items()})

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "ScribeConfig":
        """Build a config from ``RESTSCRIBE_*`` environment variables.

        Explicit keyword overrides win over the environment.
        """
        env = os.environ if environ is None else environ
        values = {}
        if env.get("RESTSCRIBE_TITLE"):
            values["title"] = env["RESTSCRIBE_TITLE"]
        if env.get("RESTSCRIBE_BASE_URL"):
            values["base_url"] = env["RESTSCRIBE_BASE_URL"]
        if env.get("RESTSCRIBE_EXAMPLE_SEED"):
            values["example_seed"] = int(env["RESTSCRIBE_EXAMPLE_SEED"])
        values.update(overrides)
        return cls(**values)
