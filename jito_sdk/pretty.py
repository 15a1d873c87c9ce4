import json
from typing import Any


class PrettyJsonValue:
    """Wraps a structured response so that str() renders indented JSON"""

    def __init__(self, value: Any):
        self.value = value

    def __str__(self) -> str:
        return json.dumps(self.value, indent=2, ensure_ascii=False)

    def __repr__(self) -> str:
        return f"PrettyJsonValue({self.value!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, PrettyJsonValue):
            return self.value == other.value
        return NotImplemented

    @classmethod
    def parse(cls, text: str) -> 'PrettyJsonValue':
        return cls(json.loads(text))
