"""Result records returned by :class:`~vidnavigator.client.VidNavigatorClient`.

One frozen dataclass per operation shape.  Each is built from the
``data`` member of the API success envelope; none of them is ever sent
back to the server.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from vidnavigator.core.models import (
    AnalysisResult,
    FileInfo,
    FileSearchResult,
    TranscriptSegment,
    VideoInfo,
    VideoSearchResult,
    parse_transcript,
)


def _optional_transcript(data: dict[str, Any]) -> tuple[TranscriptSegment, ...] | None:
    # The server decides when a transcript is included; never assume it.
    raw = data.get("transcript")
    return parse_transcript(raw) if raw is not None else None


# ---------------------------------------------------------------------------
# Transcripts
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TranscriptResult:
    video_info: VideoInfo
    transcript: tuple[TranscriptSegment, ...]

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> TranscriptResult:
        return cls(
            video_info=VideoInfo.from_json(data["video_info"]),
            transcript=parse_transcript(data["transcript"]),
        )


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FileList:
    """One page of the account's files."""

    files: tuple[FileInfo, ...]
    total_count: int
    has_more: bool

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> FileList:
        return cls(
            files=tuple(FileInfo.from_json(f) for f in data["files"]),
            total_count=data["total_count"],
            has_more=data["has_more"],
        )


@dataclass(frozen=True, slots=True)
class FileDetails:
    file_info: FileInfo
    transcript: tuple[TranscriptSegment, ...] | None = None

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> FileDetails:
        return cls(
            file_info=FileInfo.from_json(data["file_info"]),
            transcript=_optional_transcript(data),
        )


@dataclass(frozen=True, slots=True)
class UploadResult:
    file_id: str
    file_info: FileInfo
    transcript: tuple[TranscriptSegment, ...] | None = None
    """Only present when the upload waited for processing to finish."""

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> UploadResult:
        return cls(
            file_id=data["file_id"],
            file_info=FileInfo.from_json(data["file_info"]),
            transcript=_optional_transcript(data),
        )


@dataclass(frozen=True, slots=True)
class FileDeletion:
    file_id: str
    message: str

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> FileDeletion:
        return cls(file_id=data["file_id"], message=data["message"])


@dataclass(frozen=True, slots=True)
class FileUrl:
    file_id: str
    file_url: str
    """Signed URL granting temporary access to the stored file."""

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> FileUrl:
        return cls(file_id=data["file_id"], file_url=data["file_url"])


@dataclass(frozen=True, slots=True)
class FileRetry:
    file_id: str
    file_name: str
    file_status: str
    message: str

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> FileRetry:
        return cls(
            file_id=data["file_id"],
            file_name=data["file_name"],
            file_status=data["file_status"],
            message=data["message"],
        )


@dataclass(frozen=True, slots=True)
class FileCancellation:
    file_id: str
    file_name: str
    message: str

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> FileCancellation:
        return cls(
            file_id=data["file_id"],
            file_name=data["file_name"],
            message=data["message"],
        )


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VideoAnalysis:
    video_info: VideoInfo
    transcript: tuple[TranscriptSegment, ...]
    transcript_analysis: AnalysisResult

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> VideoAnalysis:
        return cls(
            video_info=VideoInfo.from_json(data["video_info"]),
            transcript=parse_transcript(data["transcript"]),
            transcript_analysis=AnalysisResult.from_json(data["transcript_analysis"]),
        )


@dataclass(frozen=True, slots=True)
class FileAnalysis:
    file_info: FileInfo
    transcript: tuple[TranscriptSegment, ...]
    transcript_analysis: AnalysisResult

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> FileAnalysis:
        return cls(
            file_info=FileInfo.from_json(data["file_info"]),
            transcript=parse_transcript(data["transcript"]),
            transcript_analysis=AnalysisResult.from_json(data["transcript_analysis"]),
        )


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VideoSearchResults:
    results: tuple[VideoSearchResult, ...]
    total_found: int
    explanation: str | None = None

    def __len__(self) -> int:
        return len(self.results)

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> VideoSearchResults:
        return cls(
            results=tuple(VideoSearchResult.from_json(r) for r in data["results"]),
            total_found=data["total_found"],
            explanation=data.get("explanation"),
        )


@dataclass(frozen=True, slots=True)
class FileSearchResults:
    results: tuple[FileSearchResult, ...]
    total_found: int
    explanation: str | None = None

    def __len__(self) -> int:
        return len(self.results)

    @classmethod
    def from_data(cls, data: dict[str, Any]) -> FileSearchResults:
        return cls(
            results=tuple(FileSearchResult.from_json(r) for r in data["results"]),
            total_found=data["total_found"],
            explanation=data.get("explanation"),
        )
