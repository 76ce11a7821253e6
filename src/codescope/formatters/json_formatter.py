"""JSON formatter for codescope."""

import json
from typing import Any

from .base import BaseFormatter


def to_jsonable(result: Any) -> Any:
    if isinstance(result, (list, tuple)):
        return [to_jsonable(item) for item in result]
    if hasattr(result, "to_dict"):
        return result.to_dict()
    return result


class JsonFormatter(BaseFormatter):
    """Render results as JSON with camelCase keys."""

    def render(self, result: Any) -> None:
        print(self.format(result))

    def format(self, result: Any) -> str:
        return json.dumps(to_jsonable(result), indent=2)
