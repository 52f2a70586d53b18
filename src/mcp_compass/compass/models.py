"""Data types for COMPASS recommendations."""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from mcp_compass.exceptions import MalformedResponseError


@dataclass
class ServerDescriptor:
    """One MCP server recommended by the COMPASS API."""

    title: str
    description: str
    github_url: str
    similarity: float | None  # 0.0 to 1.0, None when the API omitted it

    @classmethod
    def from_api_response(cls, data: Any) -> "ServerDescriptor":
        """Build a descriptor from one element of the API response.

        Missing text fields are read as empty strings. A similarity given
        as a numeric string (e.g. ``"0.9"``) is converted to a float; a
        missing or otherwise non-numeric one is read as None. Only a
        non-object element is rejected.

        Args:
            data: A decoded JSON value from the response array

        Returns:
            ServerDescriptor for the element

        Raises:
            MalformedResponseError: If ``data`` is not a JSON object
        """
        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Expected a server object, got {type(data).__name__}"
            )

        similarity = _as_score(data.get("similarity"))

        return cls(
            title=_as_text(data.get("title")),
            description=_as_text(data.get("description")),
            github_url=_as_text(data.get("github_url")),
            similarity=similarity,
        )

    @property
    def similarity_percentage(self) -> str:
        """Similarity as a percentage with one decimal place, e.g. ``87.3%``."""
        if self.similarity is None:
            return "N/A"
        percentage = self.similarity * 100
        if not math.isfinite(percentage):
            return f"{percentage}%"
        # Ties round up (81.25 -> 81.3), not to even
        rounded = Decimal(percentage).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        return f"{rounded}%"

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to a plain dict using the API's field names."""
        return {
            "title": self.title,
            "description": self.description,
            "github_url": self.github_url,
            "similarity": self.similarity,
        }


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_score(value: Any) -> float | None:
    # bool is an int subclass but never a valid score
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None
