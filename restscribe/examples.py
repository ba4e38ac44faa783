"""
Generation of example values for parameters that have no documented example.
"""

import random
import string
import uuid
from datetime import date, timedelta
from typing import Any, List, Optional


class ExampleGenerator:
    """Produces plausible example values for a parameter type.

    A seeded generator produces the same values on every run, which keeps
    generated documentation stable between builds.
    """

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def for_type(self, type_name: str, minimum: Optional[float] = None, maximum: Optional[float] = None) -> Any:
        if type_name.endswith("[]"):
            return [self.for_type(type_name[:-2], minimum, maximum) for _ in range(2)]
        if type_name == "integer":
            low = int(minimum) if minimum is not None else 1
            high = int(maximum) if maximum is not None else max(low, 100)
            low = min(low, high)
            return self._random.randint(low, high)
        if type_name == "number":
            low = float(minimum) if minimum is not None else 0.0
            high = float(maximum) if maximum is not None else max(low, 1000.0)
            low = min(low, high)
            return round(self._random.uniform(low, high), 2)
        if type_name == "boolean":
            return self._random.choice([True, False])
        if type_name == "object":
            return {}
        if type_name == "array":
            return [self.word()]
        if type_name == "file":
            return None
        return self.string(minimum, maximum)

    def word(self) -> str:
        length = self._random.randint(4, 10)
        return "".join(self._random.choice(string.ascii_lowercase) for _ in range(length))

    def string(self, minimum: Optional[float] = None, maximum: Optional[float] = None) -> str:
        value = self.word()
        if minimum is not None and len(value) < minimum:
            value = value.ljust(int(minimum), "a")
        if maximum is not None and len(value) > maximum:
            value = value[: max(int(maximum), 0)]
        return value

    def choice(self, options: List[str]) -> str:
        return self._random.choice(options)

    def email(self) -> str:
        return f"{self.word()}@example.com"

    def url(self) -> str:
        return f"http://www.{self.word()}.com/"

    def uuid(self) -> str:
        return str(uuid.UUID(int=self._random.getrandbits(128), version=4))

    def date(self) -> str:
        offset = self._random.randint(0, 3650)
        return (date(2020, 1, 1) + timedelta(days=offset)).isoformat()
