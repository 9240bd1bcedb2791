"""The launchable item value type."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from shuttle.exceptions import ParseError


def normalize_haystack(text: str) -> str:
    """Normalize a searchable string: lower-case, ``_`` and ``/`` become spaces."""
    return text.replace("_", " ").replace("/", " ").lower()


@dataclass(frozen=True)
class Item:
    """One launchable entry.

    Items compare and hash by ``value`` only; ``label`` and ``haystack`` are
    derived display/search fields.
    """

    value: str
    label: str = field(compare=False)
    haystack: str = field(compare=False, repr=False)

    @classmethod
    def parse(cls, raw: str) -> "Item":
        """Build an item from a raw identifying string such as a URL.

        The label is the last non-empty path segment of the value.
        """
        value = raw.strip()
        if not value:
            raise ParseError(raw=raw)

        label_base = value.rstrip("/")
        idx = label_base.rfind("/")
        label = label_base[idx + 1:] if idx >= 0 else value

        return cls(value=value, label=label, haystack=normalize_haystack(value))

    @classmethod
    def create(cls, label: str, value: str, search: Optional[str] = None) -> "Item":
        """Build an item from a provider's native fields.

        Args:
            label: Display string
            value: Launch target
            search: Searchable name, defaults to the label
        """
        if not value or not value.strip():
            raise ParseError(raw=value)

        haystack = normalize_haystack(search if search is not None else label)
        return cls(value=value, label=label, haystack=haystack)

    def to_dict(self) -> Dict[str, str]:
        return {"label": self.label, "value": self.value, "haystack": self.haystack}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Item":
        """Restore an item exactly as stored, without re-deriving the haystack."""
        return cls(
            value=str(data["value"]),
            label=str(data["label"]),
            haystack=str(data["haystack"]),
        )
