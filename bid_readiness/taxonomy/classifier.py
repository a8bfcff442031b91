from __future__ import annotations

from typing import Mapping, Protocol, Sequence


class CategoryClassifier(Protocol):
    """Abstraction for pluggable text classifiers."""

    def classify(self, text: str) -> str | None: ...

    def matches(self, text: str) -> list[str]: ...


class KeywordClassifier:
    """Case-insensitive substring matching against a category -> keywords table.

    ``classify`` picks the category with the most keyword hits, resolving ties
    by ``tie_break`` order (table order when not given).
    """

    def __init__(
        self,
        table: Mapping[str, Sequence[str]],
        *,
        tie_break: Sequence[str] | None = None,
    ) -> None:
        self._table = {
            category: tuple(keyword.lower() for keyword in keywords)
            for category, keywords in table.items()
        }
        order = list(tie_break or ())
        order.extend(category for category in self._table if category not in order)
        self._priority = {category: index for index, category in enumerate(order)}

    @property
    def categories(self) -> list[str]:
        return list(self._table)

    def keywords_for(self, category: str) -> tuple[str, ...]:
        return self._table.get(category, ())

    def hit_counts(self, text: str) -> dict[str, int]:
        lowered = text.lower()
        counts: dict[str, int] = {}
        for category, keywords in self._table.items():
            hits = sum(1 for keyword in keywords if keyword in lowered)
            if hits:
                counts[category] = hits
        return counts

    def matches(self, text: str) -> list[str]:
        return list(self.hit_counts(text))

    def classify(self, text: str) -> str | None:
        counts = self.hit_counts(text)
        if not counts:
            return None
        return min(counts, key=lambda category: (-counts[category], self._priority[category]))
