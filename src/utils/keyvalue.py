"""Key/value items shown in console detail sections."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


@dataclass
class KeyValueItem:
    """One labelled value. ``format`` tells the renderer how to show the value."""

    label: str
    value: Any = ""
    format: str | None = None  # 'head', 'raw', or None for plain text

    @property
    def is_head(self) -> bool:
        return self.format == "head"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "KeyValueItem":
        return cls(label=data.get("label", ""), value=data.get("value", ""), format=data.get("format"))


def visible_items(items: Iterable[KeyValueItem | Mapping[str, Any]] | None) -> list[KeyValueItem]:
    """Drop raw items whose value is empty; plain empty values are kept."""
    result = []
    for item in items or []:
        if not isinstance(item, KeyValueItem):
            item = KeyValueItem.from_dict(item)
        if item.format == "raw" and item.value == "":
            continue
        result.append(item)
    return result
