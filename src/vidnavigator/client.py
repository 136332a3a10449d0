"""Operation facade — one awaitable method per VidNavigator endpoint.

Every method follows the same three steps:

1. Build the JSON body / query parameters from typed input.
2. Delegate to the injected :class:`~vidnavigator.core.protocols.ApiTransport`.
3. Unwrap the ``{"status": "success", "data": ...}`` envelope and convert
   ``data`` through the domain model layer.

Guarantees
----------
* No local validation of URLs or remote ids — the server is the judge.
* Errors raised by the transport propagate unchanged; nothing here
  catches, reinterprets or retries them.
* The client holds only its configuration and transport, so one
  instance may be shared by concurrent tasks.
"""

from __future__ import annotations

from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from typing import Any

from vidnavigator.config import DEFAULT_BASE_URL, ClientConfig
from vidnavigator.core.models import FileStatus, SearchFocus
from vidnavigator.core.protocols import ApiTransport
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
from vidnavigator.core.usage import UsageData


def _body(**fields: Any) -> dict[str, Any]:
    """Build a request body, omitting parameters the caller left unset."""
    return {key: value for key, value in fields.items() if value is not None}


def _data(payload: dict[str, Any]) -> dict[str, Any]:
    """Unwrap the success envelope."""
    return payload["data"]


class VidNavigatorClient:
    """Async client for the VidNavigator API.

    Parameters
    ----------
    api_key:
        Credential sent with every request.  Required; an empty or
        missing key raises :class:`~vidnavigator.exceptions.ConfigurationError`
        immediately, before any connection is opened.
    base_url:
        Override for the API root (defaults to the production endpoint).
    transport_options:
        Keyword arguments passed through to ``httpx.AsyncClient``.
    transport:
        Any object satisfying :class:`ApiTransport`.  When omitted an
        :class:`~vidnavigator.infra.http_transport.HttpxTransport` is
        built from the configuration.

    Usage::

        async with VidNavigatorClient(api_key="...") as client:
            result = await client.get_transcript("https://youtu.be/...")
            for segment in result.transcript:
                print(segment.start, segment.text)
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        transport_options: Mapping[str, Any] | None = None,
        transport: ApiTransport | None = None,
    ) -> None:
        self._config = ClientConfig(
            api_key=api_key,  # type: ignore[arg-type]
            base_url=base_url if base_url is not None else DEFAULT_BASE_URL,
            transport_options=transport_options or {},
        )
        if transport is None:
            from vidnavigator.infra.http_transport import HttpxTransport

            transport = HttpxTransport(self._config)
        self._transport: ApiTransport = transport

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> VidNavigatorClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying transport and its connection pool."""
        await self._transport.aclose()

    # ------------------------------------------------------------------
    # Transcripts
    # ------------------------------------------------------------------

    async def get_transcript(
        self,
        video_url: str,
        language: str | None = None,
    ) -> TranscriptResult:
        """Fetch the transcript and metadata of an online video.

        Parameters
        ----------
        video_url:
            Public URL of the video (YouTube, ...).
        language:
            Preferred transcript language code, e.g. ``"en"``.
        """
        payload = await self._transport.execute(
            "POST",
            "/transcript",
            json=_body(video_url=video_url, language=language),
        )
        return TranscriptResult.from_data(_data(payload))

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    async def get_files(
        self,
        limit: int | None = None,
        offset: int | None = None,
        status: FileStatus | str | None = None,
    ) -> FileList:
        """List uploaded files, one page at a time.

        Raises
        ------
        ValueError
            If *status* is not a valid :class:`FileStatus` value.
        """
        status_value = FileStatus(status).value if status is not None else None
        payload = await self._transport.execute(
            "GET",
            "/files",
            params={"limit": limit, "offset": offset, "status": status_value},
        )
        return FileList.from_data(_data(payload))

    async def get_file(self, file_id: str) -> FileDetails:
        """Fetch one file's metadata, with its transcript when available."""
        payload = await self._transport.execute("GET", f"/file/{file_id}")
        return FileDetails.from_data(_data(payload))

    async def upload_file(
        self,
        file_path: str | PathLike[str],
        wait_for_completion: bool = False,
    ) -> UploadResult:
        """Upload a local audio/video file as multipart form data.

        With *wait_for_completion* the server holds the response until
        processing finishes and includes the transcript.  The upload is
        not retried or resumed on failure.

        The file is streamed in chunks rather than loaded into memory, but
        httpx reads it with ordinary blocking file reads on the event loop
        thread.  Uploading a large file from a busy loop stalls other
        tasks for the duration of each read; run the call on a dedicated
        loop or thread if that matters.

        Raises
        ------
        TransportError
            If *file_path* cannot be opened or read.  A file that cannot be
            opened fails before any request is sent.
        """
        form = {"wait_for_completion": "true"} if wait_for_completion else None
        payload = await self._transport.execute(
            "POST",
            "/upload/file",
            data=form,
            files={"file": Path(file_path)},
        )
        return UploadResult.from_data(_data(payload))

    async def delete_file(self, file_id: str) -> FileDeletion:
        payload = await self._transport.execute("DELETE", f"/file/{file_id}/delete")
        return FileDeletion.from_data(_data(payload))

    async def get_file_url(self, file_id: str) -> FileUrl:
        """Return a signed URL for downloading the stored file."""
        payload = await self._transport.execute("GET", f"/file/{file_id}/url")
        return FileUrl.from_data(_data(payload))

    async def retry_file_processing(self, file_id: str) -> FileRetry:
        """Re-queue a file whose processing failed."""
        payload = await self._transport.execute("POST", f"/file/{file_id}/retry")
        return FileRetry.from_data(_data(payload))

    async def cancel_file_upload(self, file_id: str) -> FileCancellation:
        payload = await self._transport.execute("POST", f"/file/{file_id}/cancel")
        return FileCancellation.from_data(_data(payload))

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    async def analyze_video(
        self,
        video_url: str,
        query: str | None = None,
    ) -> VideoAnalysis:
        """Summarise an online video; *query* asks a question about it."""
        payload = await self._transport.execute(
            "POST",
            "/analyze/video",
            json=_body(video_url=video_url, query=query),
        )
        return VideoAnalysis.from_data(_data(payload))

    async def analyze_file(
        self,
        file_id: str,
        query: str | None = None,
    ) -> FileAnalysis:
        """Summarise an uploaded file; *query* asks a question about it."""
        payload = await self._transport.execute(
            "POST",
            "/analyze/file",
            json=_body(file_id=file_id, query=query),
        )
        return FileAnalysis.from_data(_data(payload))

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    async def search_videos(
        self,
        query: str,
        *,
        use_enhanced_search: bool | None = None,
        start_year: int | None = None,
        end_year: int | None = None,
        focus: SearchFocus | str | None = None,
        duration: int | None = None,
    ) -> VideoSearchResults:
        """Search online videos by natural-language *query*.

        Parameters
        ----------
        use_enhanced_search:
            Let the server rewrite the query for better recall.
        start_year, end_year:
            Restrict results to videos published in this range.
        focus:
            Ranking strategy: ``relevance``, ``popularity`` or ``brevity``.
        duration:
            Duration filter forwarded verbatim to the server.

        Raises
        ------
        ValueError
            If *focus* is not a valid :class:`SearchFocus` value.
        """
        focus_value = SearchFocus(focus).value if focus is not None else None
        payload = await self._transport.execute(
            "POST",
            "/search/video",
            json=_body(
                query=query,
                use_enhanced_search=use_enhanced_search,
                start_year=start_year,
                end_year=end_year,
                focus=focus_value,
                duration=duration,
            ),
        )
        return VideoSearchResults.from_data(_data(payload))

    async def search_files(self, query: str) -> FileSearchResults:
        """Search the transcripts of the account's uploaded files."""
        payload = await self._transport.execute(
            "POST",
            "/search/file",
            json={"query": query},
        )
        return FileSearchResults.from_data(_data(payload))

    # ------------------------------------------------------------------
    # System
    # ------------------------------------------------------------------

    async def get_usage(self) -> UsageData:
        payload = await self._transport.execute("GET", "/usage")
        return UsageData.from_json(_data(payload))

    async def health_check(self) -> Any:
        """Liveness check; returns the raw, unwrapped JSON payload."""
        return await self._transport.execute("GET", "/health")
