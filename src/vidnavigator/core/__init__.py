"""Core layer — domain models, result records and transport contract.

Rules
-----
* No network or filesystem I/O.
* No imports from ``infra`` or ``client``.
* Conversion between raw JSON and typed records is pure and explicit,
  one field at a time.
"""

from vidnavigator.core.models import (
    AnalysisResult,
    FileInfo,
    FileSearchResult,
    FileStatus,
    SearchFocus,
    TranscriptSegment,
    UploadedFileInfo,
    VideoInfo,
    VideoSearchResult,
)
from vidnavigator.core.protocols import ApiTransport
from vidnavigator.core.usage import UsageData

__all__: list[str] = [
    "AnalysisResult",
    "ApiTransport",
    "FileInfo",
    "FileSearchResult",
    "FileStatus",
    "SearchFocus",
    "TranscriptSegment",
    "UploadedFileInfo",
    "UsageData",
    "VideoInfo",
    "VideoSearchResult",
]
