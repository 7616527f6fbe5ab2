"""
Data model for indexed records, search options and results.

Records are validated once, when they enter the index. Every optional
field has a concrete empty value afterwards, so the indexer and ranker
never need to re-check the shape of a record.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

RecordId = Union[str, int]


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _tag(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


@dataclass(frozen=True)
class Record:
    """The unit of indexing and retrieval."""

    id: RecordId
    keywords: Tuple[str, ...] = ()
    primary_text: str = ""
    secondary_text: str = ""
    category: Optional[str] = None
    level: Optional[str] = None
    kind: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Optional["Record"]:
        """
        Build a Record from a loosely shaped mapping.

        Accepts ``question``/``answer`` and ``primaryText``/``secondaryText``
        as aliases for the two free-text fields, and ``type`` for ``kind``.
        Fields beyond these are ignored.

        Args:
            data: Mapping describing one record.

        Returns:
            The record, or None when the value is not a mapping or carries no id.
        """
        if not isinstance(data, Mapping):
            return None
        record_id = data.get("id")
        if record_id is None or record_id == "":
            return None

        keywords = data.get("keywords") or ()
        if not isinstance(keywords, (list, tuple, set, frozenset)):
            keywords = (keywords,)

        return cls(
            id=record_id,
            keywords=tuple(str(k) for k in keywords if k),
            primary_text=_text(_first(data, "primary_text", "primaryText", "question")),
            secondary_text=_text(_first(data, "secondary_text", "secondaryText", "answer")),
            category=_tag(data.get("category")),
            level=_tag(data.get("level")),
            kind=_tag(_first(data, "kind", "type")),
        )


def _first(data: Mapping[str, Any], *names: str) -> Any:
    for name in names:
        if data.get(name) is not None:
            return data[name]
    return None


@dataclass(frozen=True)
class SearchOptions:
    """Filters and limit for a single search call."""

    category: Optional[str] = None
    level: Optional[str] = None
    limit: int = 10

    @classmethod
    def coerce(cls, options: Union["SearchOptions", Mapping[str, Any], None],
               default_limit: int = 10, **overrides: Any) -> "SearchOptions":
        """Normalize None, a mapping or an instance into SearchOptions."""
        if isinstance(options, SearchOptions):
            values = {"category": options.category, "level": options.level, "limit": options.limit}
        else:
            values = dict(options or {})
        values.update({k: v for k, v in overrides.items() if v is not None})

        limit = values.get("limit")
        if not isinstance(limit, int) or isinstance(limit, bool) or limit <= 0:
            limit = default_limit

        return cls(
            category=_tag(values.get("category")),
            level=_tag(values.get("level")),
            limit=limit,
        )

    def cache_key_part(self) -> Tuple[str, str, int]:
        return (self.category or "", self.level or "", self.limit)


@dataclass(frozen=True)
class SearchResult:
    """A record with the relevance score it earned for one query."""

    record: Record
    score: int


@dataclass(frozen=True)
class Example:
    no: str
    ru: str


@dataclass(frozen=True)
class VocabularyEntry:
    """A Norwegian word or phrase with its Russian translation."""

    id: int
    norwegian: str
    russian: str
    category: Optional[str] = None
    level: Optional[str] = None
    type: str = "word"
    pronunciation: str = ""
    examples: Tuple[Example, ...] = ()
    synonyms: Tuple[str, ...] = ()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "VocabularyEntry":
        return cls(
            id=data["id"],
            norwegian=data["norwegian"],
            russian=data["russian"],
            category=_tag(data.get("category")),
            level=_tag(data.get("level")),
            type=data.get("type", "word"),
            pronunciation=data.get("pronunciation", ""),
            examples=tuple(Example(no=e["no"], ru=e["ru"]) for e in data.get("examples", [])),
            synonyms=tuple(data.get("synonyms", [])),
        )


@dataclass(frozen=True)
class GrammarRule:
    id: int
    topic: str
    norwegian_rule: str
    russian_explanation: str
    examples: Tuple[Example, ...] = ()
    level: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "GrammarRule":
        return cls(
            id=data["id"],
            topic=data["topic"],
            norwegian_rule=data["norwegian_rule"],
            russian_explanation=data["russian_explanation"],
            examples=tuple(Example(no=e["no"], ru=e["ru"]) for e in data.get("examples", [])),
            level=_tag(data.get("level")),
        )


@dataclass
class Dataset:
    """Everything the application loads once at startup."""

    vocabulary: List[VocabularyEntry] = field(default_factory=list)
    grammar: List[GrammarRule] = field(default_factory=list)
    categories: Dict[str, str] = field(default_factory=dict)
    levels: Dict[str, str] = field(default_factory=dict)
    translations: Dict[str, str] = field(default_factory=dict)
    records: List[Record] = field(default_factory=list)
