"""Domain models for vidnavigator.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and JSON conversion.  They carry zero I/O
and no dependency on the transport layer.

Conversion rules
----------------
* ``from_json`` copies known keys field by field.  Missing optional keys
  become ``None``; a missing required key raises ``KeyError``.
* ``to_json`` is the inverse projection.  Fields holding ``None`` are
  omitted, unless the key arrived as an explicit ``null``: each record
  remembers those keys in a hidden ``_null_keys`` field (excluded from
  equality and repr), so ``Model.from_json(raw).to_json() == raw``.
* Sequences are stored as tuples and converted element-wise, in order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


def _compact(
    fields: dict[str, Any], keep: frozenset[str] = frozenset(),
) -> dict[str, Any]:
    """Drop ``None`` values from a field mapping, except for keys in *keep*."""
    return {
        key: value for key, value in fields.items()
        if value is not None or key in keep
    }


def _nulls_in(raw: dict[str, Any]) -> frozenset[str]:
    """Keys of *raw* that carry an explicit ``null``."""
    return frozenset(key for key, value in raw.items() if value is None)


def _hidden_nulls() -> Any:
    return field(default=frozenset(), compare=False, repr=False)


def _tuple_or_none(raw: Any) -> tuple[Any, ...] | None:
    return tuple(raw) if raw is not None else None


def _list_or_none(values: tuple[Any, ...] | None) -> list[Any] | None:
    return list(values) if values is not None else None


# ---------------------------------------------------------------------------
# Video metadata
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VideoInfo:
    """Metadata of an online source video (e.g. YouTube).

    Every field is optional: ``None`` means the source did not provide it.
    """

    title: str | None = None
    description: str | None = None
    thumbnail: str | None = None
    url: str | None = None
    channel: str | None = None
    channel_url: str | None = None
    duration: float | None = None
    """Length in seconds."""

    views: int | None = None
    likes: int | None = None
    published_date: str | None = None
    keywords: tuple[str, ...] | None = None
    category: str | None = None
    available_languages: tuple[str, ...] | None = None
    """Transcript languages offered by the source."""

    selected_language: str | None = None
    """Language of the transcript returned alongside this record."""
    _null_keys: frozenset[str] = _hidden_nulls()

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> VideoInfo:
        return cls(
            title=raw.get("title"),
            description=raw.get("description"),
            thumbnail=raw.get("thumbnail"),
            url=raw.get("url"),
            channel=raw.get("channel"),
            channel_url=raw.get("channel_url"),
            duration=raw.get("duration"),
            views=raw.get("views"),
            likes=raw.get("likes"),
            published_date=raw.get("published_date"),
            keywords=_tuple_or_none(raw.get("keywords")),
            category=raw.get("category"),
            available_languages=_tuple_or_none(raw.get("available_languages")),
            selected_language=raw.get("selected_language"),
            _null_keys=_nulls_in(raw),
        )

    def to_json(self) -> dict[str, Any]:
        return _compact({
            "title": self.title,
            "description": self.description,
            "thumbnail": self.thumbnail,
            "url": self.url,
            "channel": self.channel,
            "channel_url": self.channel_url,
            "duration": self.duration,
            "views": self.views,
            "likes": self.likes,
            "published_date": self.published_date,
            "keywords": _list_or_none(self.keywords),
            "category": self.category,
            "available_languages": _list_or_none(self.available_languages),
            "selected_language": self.selected_language,
        }, self._null_keys)


# ---------------------------------------------------------------------------
# Transcript
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TranscriptSegment:
    """One timed caption unit of a video or audio transcript."""

    text: str
    start: float
    """Start time in seconds."""

    end: float
    """End time in seconds; never earlier than :attr:`start`."""

    @property
    def duration(self) -> float:
        return self.end - self.start

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> TranscriptSegment:
        return cls(text=raw["text"], start=raw["start"], end=raw["end"])

    def to_json(self) -> dict[str, Any]:
        return {"text": self.text, "start": self.start, "end": self.end}


def parse_transcript(raw: list[dict[str, Any]]) -> tuple[TranscriptSegment, ...]:
    """Convert a raw segment list, preserving server order."""
    return tuple(TranscriptSegment.from_json(entry) for entry in raw)


# ---------------------------------------------------------------------------
# Uploaded files
# ---------------------------------------------------------------------------

class FileStatus(str, Enum):
    """Processing state of an uploaded file.

    The only closed enumeration in the API.  ``FileStatus("bogus")``
    raises ``ValueError``.
    """

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class FileInfo:
    """Complete metadata for a file stored in VidNavigator."""

    id: str
    name: str
    status: FileStatus
    created_at: str
    updated_at: str
    size: int | None = None
    """Size in bytes."""

    type: str | None = None
    """MIME type reported by the server."""

    duration: float | None = None
    original_file_date: str | None = None
    has_transcript: bool | None = None
    error_message: str | None = None
    """Populated when :attr:`status` is ``failed``."""
    _null_keys: frozenset[str] = _hidden_nulls()

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> FileInfo:
        return cls(
            id=raw["id"],
            name=raw["name"],
            status=FileStatus(raw["status"]),
            created_at=raw["created_at"],
            updated_at=raw["updated_at"],
            size=raw.get("size"),
            type=raw.get("type"),
            duration=raw.get("duration"),
            original_file_date=raw.get("original_file_date"),
            has_transcript=raw.get("has_transcript"),
            error_message=raw.get("error_message"),
            _null_keys=_nulls_in(raw),
        )

    def to_json(self) -> dict[str, Any]:
        return _compact({
            "id": self.id,
            "name": self.name,
            "size": self.size,
            "type": self.type,
            "duration": self.duration,
            "status": self.status.value,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "original_file_date": self.original_file_date,
            "has_transcript": self.has_transcript,
            "error_message": self.error_message,
        }, self._null_keys)


@dataclass(frozen=True, slots=True)
class UploadedFileInfo:
    """Metadata returned for a freshly uploaded file, before processing.

    Intentionally a different shape from :class:`FileInfo`; the two are
    not reconciled.
    """

    file_id: str
    filename: str
    created_at: str
    title: str | None = None
    file_size: int | None = None
    file_type: str | None = None
    duration: float | None = None
    original_file_date: str | None = None
    _null_keys: frozenset[str] = _hidden_nulls()

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> UploadedFileInfo:
        return cls(
            file_id=raw["file_id"],
            filename=raw["filename"],
            created_at=raw["created_at"],
            title=raw.get("title"),
            file_size=raw.get("file_size"),
            file_type=raw.get("file_type"),
            duration=raw.get("duration"),
            original_file_date=raw.get("original_file_date"),
            _null_keys=_nulls_in(raw),
        )

    def to_json(self) -> dict[str, Any]:
        return _compact({
            "title": self.title,
            "file_id": self.file_id,
            "filename": self.filename,
            "file_size": self.file_size,
            "file_type": self.file_type,
            "duration": self.duration,
            "created_at": self.created_at,
            "original_file_date": self.original_file_date,
        }, self._null_keys)


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NamedEntity:
    """A person or place mentioned in a transcript."""

    name: str | None = None
    context: str | None = None
    _null_keys: frozenset[str] = _hidden_nulls()

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> NamedEntity:
        return cls(
            name=raw.get("name"),
            context=raw.get("context"),
            _null_keys=_nulls_in(raw),
        )

    def to_json(self) -> dict[str, Any]:
        return _compact(
            {"name": self.name, "context": self.context}, self._null_keys,
        )


@dataclass(frozen=True, slots=True)
class KeySubject:
    name: str | None = None
    description: str | None = None
    importance: str | None = None
    _null_keys: frozenset[str] = _hidden_nulls()

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> KeySubject:
        return cls(
            name=raw.get("name"),
            description=raw.get("description"),
            importance=raw.get("importance"),
            _null_keys=_nulls_in(raw),
        )

    def to_json(self) -> dict[str, Any]:
        return _compact({
            "name": self.name,
            "description": self.description,
            "importance": self.importance,
        }, self._null_keys)


@dataclass(frozen=True, slots=True)
class QueryAnswer:
    """Answer to the optional question passed to an analysis call."""

    answer: str | None = None
    best_segment_index: int | None = None
    relevant_segments: tuple[str, ...] | None = None
    _null_keys: frozenset[str] = _hidden_nulls()

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> QueryAnswer:
        return cls(
            answer=raw.get("answer"),
            best_segment_index=raw.get("best_segment_index"),
            relevant_segments=_tuple_or_none(raw.get("relevant_segments")),
            _null_keys=_nulls_in(raw),
        )

    def to_json(self) -> dict[str, Any]:
        return _compact({
            "answer": self.answer,
            "best_segment_index": self.best_segment_index,
            "relevant_segments": _list_or_none(self.relevant_segments),
        }, self._null_keys)


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """AI-derived analysis of a transcript.

    All fields are optional; ``None`` means "not computed".
    """

    summary: str | None = None
    people: tuple[NamedEntity, ...] | None = None
    places: tuple[NamedEntity, ...] | None = None
    key_subjects: tuple[KeySubject, ...] | None = None
    timestamp: float | None = None
    relevant_text: str | None = None
    query_answer: QueryAnswer | None = None
    _null_keys: frozenset[str] = _hidden_nulls()

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> AnalysisResult:
        people = raw.get("people")
        places = raw.get("places")
        key_subjects = raw.get("key_subjects")
        query_answer = raw.get("query_answer")
        return cls(
            summary=raw.get("summary"),
            people=(
                tuple(NamedEntity.from_json(p) for p in people)
                if people is not None else None
            ),
            places=(
                tuple(NamedEntity.from_json(p) for p in places)
                if places is not None else None
            ),
            key_subjects=(
                tuple(KeySubject.from_json(s) for s in key_subjects)
                if key_subjects is not None else None
            ),
            timestamp=raw.get("timestamp"),
            relevant_text=raw.get("relevant_text"),
            query_answer=(
                QueryAnswer.from_json(query_answer)
                if query_answer is not None else None
            ),
            _null_keys=_nulls_in(raw),
        )

    def to_json(self) -> dict[str, Any]:
        return _compact({
            "summary": self.summary,
            "people": (
                [p.to_json() for p in self.people]
                if self.people is not None else None
            ),
            "places": (
                [p.to_json() for p in self.places]
                if self.places is not None else None
            ),
            "key_subjects": (
                [s.to_json() for s in self.key_subjects]
                if self.key_subjects is not None else None
            ),
            "timestamp": self.timestamp,
            "relevant_text": self.relevant_text,
            "query_answer": (
                self.query_answer.to_json()
                if self.query_answer is not None else None
            ),
        }, self._null_keys)


# ---------------------------------------------------------------------------
# Search results
# ---------------------------------------------------------------------------

class SearchFocus(str, Enum):
    """Ranking strategy for video search."""

    RELEVANCE = "relevance"
    POPULARITY = "popularity"
    BREVITY = "brevity"


@dataclass(frozen=True, slots=True)
class VideoSearchResult:
    """A ranked video hit.

    Wraps a :class:`VideoInfo` rather than subclassing it.  Every
    attribute of the wrapped record is readable directly on the result,
    so ``result.title`` and ``result.video.title`` are equivalent.
    """

    video: VideoInfo
    relevance_score: float | None = None
    transcript_summary: str | None = None
    _null_keys: frozenset[str] = _hidden_nulls()

    def __getattr__(self, name: str) -> Any:
        # Only reached for names the result does not define itself.
        if name == "video" or name.startswith("__"):
            raise AttributeError(name)
        return getattr(self.video, name)

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> VideoSearchResult:
        return cls(
            video=VideoInfo.from_json(raw),
            relevance_score=raw.get("relevance_score"),
            transcript_summary=raw.get("transcript_summary"),
            _null_keys=_nulls_in(raw),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            **self.video.to_json(),
            **_compact({
                "relevance_score": self.relevance_score,
                "transcript_summary": self.transcript_summary,
            }, self._null_keys),
        }


@dataclass(frozen=True, slots=True)
class FileSearchResult:
    """A ranked file hit, wrapping a :class:`FileInfo`.

    Exposes every :class:`FileInfo` attribute directly, plus the search
    fields and a ``file_url`` for accessing the matched file.
    """

    file: FileInfo
    relevance_score: float | None = None
    transcript_summary: str | None = None
    file_url: str | None = None
    _null_keys: frozenset[str] = _hidden_nulls()

    def __getattr__(self, name: str) -> Any:
        if name == "file" or name.startswith("__"):
            raise AttributeError(name)
        return getattr(self.file, name)

    @classmethod
    def from_json(cls, raw: dict[str, Any]) -> FileSearchResult:
        return cls(
            file=FileInfo.from_json(raw),
            relevance_score=raw.get("relevance_score"),
            transcript_summary=raw.get("transcript_summary"),
            file_url=raw.get("file_url"),
            _null_keys=_nulls_in(raw),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            **self.file.to_json(),
            **_compact({
                "relevance_score": self.relevance_score,
                "transcript_summary": self.transcript_summary,
                "file_url": self.file_url,
            }, self._null_keys),
        }
