"""
Competition Catalog
admission_scoring/scoring/competition_catalog.py

Recognised competitions and their ordinance class (A+类 / A类 / A-类),
loaded from the packaged JSON file data/competitions.json.

Usage:
    catalog = CompetitionCatalog.default()
    catalog.search("编程")                 # name / keyword / organizer match
    catalog.resolve_level("全国大学生数学建模竞赛")   # "A类"
"""

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

_CATALOG_PATH = Path(__file__).with_name("data") / "competitions.json"


@dataclass(frozen=True)
class CompetitionEntry:
    id: str
    name: str
    level: str
    organizer: str
    category: Optional[str] = None
    keywords: Tuple[str, ...] = ()

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on name, keywords or organizer."""
        if query in self.name.lower():
            return True
        if any(query in keyword.lower() for keyword in self.keywords):
            return True
        return query in self.organizer.lower()


class CompetitionCatalog:
    """Read-only lookup over the recognised competitions."""

    def __init__(self, entries: Iterable[CompetitionEntry], version: str = ""):
        self.version = version
        self._entries: Tuple[CompetitionEntry, ...] = tuple(entries)
        self._by_id = {entry.id: entry for entry in self._entries}
        self._by_name = {entry.name: entry for entry in self._entries}

    @classmethod
    def from_file(cls, path: Path) -> "CompetitionCatalog":
        with path.open("r", encoding="utf-8") as fh:
            raw = json.load(fh)
        entries = [
            CompetitionEntry(
                id=item["id"],
                name=item["name"],
                level=item["level"],
                organizer=item.get("organizer", ""),
                category=item.get("category"),
                keywords=tuple(item.get("keywords") or ()),
            )
            for item in raw["competitions"]
        ]
        return cls(entries, version=raw.get("version", ""))

    @staticmethod
    @lru_cache
    def default() -> "CompetitionCatalog":
        """Catalog bundled with the package (loaded once)."""
        return CompetitionCatalog.from_file(_CATALOG_PATH)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def all(self) -> List[CompetitionEntry]:
        return list(self._entries)

    def get(self, competition_id: str) -> Optional[CompetitionEntry]:
        return self._by_id.get(competition_id)

    def search(self, query: Optional[str]) -> List[CompetitionEntry]:
        """Entries matching the query; a blank query returns everything."""
        if not query or not query.strip():
            return self.all()
        needle = query.strip().lower()
        return [entry for entry in self._entries if entry.matches(needle)]

    def by_level(self, level: str) -> List[CompetitionEntry]:
        return [entry for entry in self._entries if entry.level == level]

    def resolve_level(self, name) -> Optional[str]:
        """Ordinance class for an exact competition name, if catalogued."""
        if not isinstance(name, str) or not name:
            return None
        entry = self._by_name.get(name.strip())
        return entry.level if entry else None
