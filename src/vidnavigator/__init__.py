"""vidnavigator — async Python client for the VidNavigator API.

Transcripts, AI analysis and search over online videos and uploaded
files, returned as immutable typed records.

Logging goes through loguru and is disabled by default; call
``logger.enable("vidnavigator")`` to see request traces.
"""

from loguru import logger

from vidnavigator.client import VidNavigatorClient
from vidnavigator.config import DEFAULT_BASE_URL, ClientConfig
from vidnavigator.core.models import (
    AnalysisResult,
    FileInfo,
    FileSearchResult,
    FileStatus,
    KeySubject,
    NamedEntity,
    QueryAnswer,
    SearchFocus,
    TranscriptSegment,
    UploadedFileInfo,
    VideoInfo,
    VideoSearchResult,
)
from vidnavigator.core.responses import (
    FileAnalysis,
    FileCancellation,
    FileDeletion,
    FileDetails,
    FileList,
    FileRetry,
    FileSearchResults,
    FileUrl,
    TranscriptResult,
    UploadResult,
    VideoAnalysis,
    VideoSearchResults,
)
from vidnavigator.core.usage import (
    UNLIMITED,
    ServiceUsage,
    ServiceUsageBreakdown,
    StorageUsage,
    Subscription,
    UsageData,
    UsagePeriod,
    is_unlimited,
)
from vidnavigator.exceptions import (
    AccessDeniedError,
    APIError,
    AuthenticationError,
    BadRequestError,
    ConfigurationError,
    ErrorKind,
    NotFoundError,
    PaymentRequiredError,
    RateLimitExceededError,
    ServerError,
    TransportError,
    VidNavigatorError,
)
from vidnavigator.version import __version__

logger.disable("vidnavigator")

__all__: list[str] = [
    "APIError",
    "AccessDeniedError",
    "AnalysisResult",
    "AuthenticationError",
    "BadRequestError",
    "ClientConfig",
    "ConfigurationError",
    "DEFAULT_BASE_URL",
    "ErrorKind",
    "FileAnalysis",
    "FileCancellation",
    "FileDeletion",
    "FileDetails",
    "FileInfo",
    "FileList",
    "FileRetry",
    "FileSearchResult",
    "FileSearchResults",
    "FileStatus",
    "FileUrl",
    "KeySubject",
    "NamedEntity",
    "NotFoundError",
    "PaymentRequiredError",
    "QueryAnswer",
    "RateLimitExceededError",
    "SearchFocus",
    "ServerError",
    "ServiceUsage",
    "ServiceUsageBreakdown",
    "StorageUsage",
    "Subscription",
    "TranscriptResult",
    "TranscriptSegment",
    "TransportError",
    "UNLIMITED",
    "UploadResult",
    "UploadedFileInfo",
    "UsageData",
    "UsagePeriod",
    "VidNavigatorClient",
    "VidNavigatorError",
    "VideoAnalysis",
    "VideoInfo",
    "VideoSearchResult",
    "VideoSearchResults",
    "__version__",
    "is_unlimited",
]
