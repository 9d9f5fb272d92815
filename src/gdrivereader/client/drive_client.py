"""Google Drive v3 read client."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable, Optional, TypeVar

from cachetools import TTLCache
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from gdrivereader.auth import AccessType, AuthPrompt, OAuthHandle, Token
from gdrivereader.errors import (
    MalformedResponseError,
    NoDataError,
    NotFoundError,
    http_error_to_info,
    map_http_error,
)
from gdrivereader.models import CacheEntry, DriveFile

from .config import ClientConfig
from .events import EventEmitter, EventType
from .params import DOWNLOAD_TIMEOUT_MS, QuerySpace, ResponseAlt, build_name_query

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DriveClient:
    """
    Read files from one Drive folder on behalf of an OAuth user.

    Every request first ensures a usable access token, then makes a single
    Drive call. There is no retry, backoff or pagination; SDK and transport
    errors reach the caller unchanged, non-success HTTP statuses are mapped
    to gdrivereader errors.

    Events (see ``events``):
        - REFRESHED_ACCESS_TOKEN after every successful ensure_access()
        - REFRESH_TOKEN_ERROR with the exception when ensure_access() fails
        - FOUND_FILE with the file name (or None) when content is returned
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        oauth: Optional[OAuthHandle] = None,
        cache_timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config
        auth = config.auth
        if oauth is None:
            oauth = OAuthHandle(
                auth.client_id,
                auth.secret,
                auth.callback,
                scopes=config.scope,
                state=auth.state,
            )
        self._oauth = oauth
        self._drive: Any = None
        self._owns_drive = True
        self._drive_lock = threading.Lock()
        self.events = EventEmitter()

        self._cache: Optional[TTLCache] = None
        self._cache_lock = threading.Lock()
        if config.use_cache:
            self._cache = TTLCache(
                maxsize=config.cache_size,
                ttl=config.cache_max_age,
                timer=cache_timer,
                getsizeof=_entry_size,
            )

        if auth.token is not None:
            self._oauth.set_credentials(auth.token)

    @classmethod
    def from_service(
        cls,
        config: ClientConfig,
        service: Any,
        *,
        oauth: Optional[OAuthHandle] = None,
        cache_timer: Callable[[], float] = time.monotonic,
    ) -> "DriveClient":
        """Create a client around a pre-built Drive service (useful for tests)."""
        obj = cls(config, oauth=oauth, cache_timer=cache_timer)
        obj._drive = service
        obj._owns_drive = False
        return obj

    # ----------------------------
    # Accessors
    # ----------------------------
    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def drive(self) -> Any:
        """
        Google's Drive v3 service, built on first access.

        Returns:
            googleapiclient.discovery.Resource
        """
        if self._drive is None:
            with self._drive_lock:
                if self._drive is None:
                    logger.debug("[drive_client] building drive v3 service")
                    self._drive = build(
                        "drive",
                        "v3",
                        credentials=self._oauth.credentials,
                        developerKey=self._config.api_key,
                        cache_discovery=False,
                    )
        return self._drive

    @property
    def token(self) -> Optional[Token]:
        """Configured token. Refreshes done by the OAuth handle are not reflected."""
        return self._config.auth.token

    @property
    def authorization_url(self) -> str:
        """Consent URL requesting offline access (refresh token) for the configured scope."""
        return self._oauth.generate_auth_url(
            access_type=AccessType.OFFLINE,
            prompt=AuthPrompt.CONSENT,
            scope=self._config.scope,
        )

    @property
    def cache(self) -> Optional[TTLCache]:
        """Content cache keyed by file name, or None when caching is off.

        Entries expire ``cache_max_age`` seconds after they were stored.
        """
        return self._cache

    def set_token(self, token: Token) -> None:
        """Install new credentials for subsequent requests."""
        self._oauth.set_credentials(token)
        with self._drive_lock:
            if self._owns_drive:
                self._drive = None

    # ----------------------------
    # Requests
    # ----------------------------
    def ensure_access(self) -> None:
        """
        Make sure the OAuth handle holds a usable access token.

        Raises:
            Whatever the OAuth handle raised (typically
            google.auth.exceptions.RefreshError), unchanged. A failing
            REFRESH_TOKEN_ERROR listener is logged and does not replace it.
        """
        try:
            self._oauth.get_request_metadata()
        except Exception as exc:
            logger.warning("[drive_client] access token refresh failed; error:%s", exc)
            try:
                self.events.emit(EventType.REFRESH_TOKEN_ERROR, exc)
            except Exception:
                logger.exception("[drive_client] refresh error listener failed")
            raise
        self.events.emit(EventType.REFRESHED_ACCESS_TOKEN)

    def get_file_list(self, params: dict[str, Any]) -> list[DriveFile]:
        """
        List files matching a Drive query.

        ``params`` are passed to ``files.list`` verbatim (q, spaces, corpora,
        orderBy, pageSize, pageToken, ...).

        See https://developers.google.com/drive/v3/web/search-parameters

        Raises:
            MalformedResponseError: if the response carries no ``files`` list,
                or an entry has no ``id``.
            DriveClientError subclass: on a non-success HTTP status.
        """
        self.ensure_access()
        logger.debug("[drive_client] files.list; q:%s", params.get("q"))

        request = self.drive.files().list(**params)
        data = self._execute(request.execute)

        files = data.get("files") if isinstance(data, dict) else None
        if not isinstance(files, list):
            raise MalformedResponseError(
                "Drive returned a file list response without 'files'",
                details={"params": dict(params)},
            )

        for index, entry in enumerate(files):
            file_id = entry.get("id") if isinstance(entry, dict) else None
            if not isinstance(file_id, str) or not file_id:
                raise MalformedResponseError(
                    "Drive returned a file entry without 'id'",
                    details={"params": dict(params), "index": index},
                )
        return [DriveFile.from_api(f) for f in files]

    def get_file_content(
        self,
        params: dict[str, Any],
        file_name: Optional[str] = None,
    ) -> Any:
        """
        Get the content (``alt="media"``) or metadata of a single file.

        ``timeout`` in params is taken as milliseconds and applied to the HTTP
        transport of this request. The payload is returned as Drive sent it:
        bytes for media downloads, a dict for metadata.

        Raises:
            NoDataError: if the response has no data.
            DriveClientError subclass: on a non-success HTTP status.
        """
        self.ensure_access()

        request_params = dict(params)
        timeout_ms = request_params.pop("timeout", None)
        alt = request_params.pop("alt", None)

        files = self.drive.files()
        if alt == ResponseAlt.MEDIA.value:
            request = files.get_media(**request_params)
        else:
            if alt is not None:
                request_params["alt"] = alt
            request = files.get(**request_params)

        logger.debug(
            "[drive_client] files.get; file_id:%s alt:%s",
            request_params.get("fileId"),
            alt,
        )
        if timeout_ms is None:
            data = self._execute(request.execute)
        else:
            http = self._oauth.authorized_http(timeout=timeout_ms / 1000)
            try:
                data = self._execute(request.execute, http=http)
            finally:
                http.http.close()

        if data is None:
            message = "No data returned for file"
            if file_name is not None:
                message += " " + file_name
            raise NoDataError(
                message,
                details={"file_id": request_params.get("fileId"), "file_name": file_name},
            )

        self.events.emit(EventType.FOUND_FILE, file_name)
        return data

    def read_file_by_name(self, file_name: str) -> str:
        """
        Read the first file named ``file_name`` in the configured folder.

        Drive's result order decides which file wins when several share the
        name. Content is cached by name when caching is enabled.

        Raises:
            NotFoundError: if no file has that name.
        """
        cached = self._cache_get(file_name)
        if cached is not None:
            logger.debug("[drive_client] cache hit; name:%s", file_name)
            return cached.content

        self.ensure_access()

        params = {
            "q": build_name_query(file_name, self._config.folder_id),
            "spaces": QuerySpace.DRIVE.value,
        }
        files = self.get_file_list(params)

        if not files:
            # FILE_NOT_FOUND is not emitted for name lookups.
            raise NotFoundError(
                f"File not found: “{file_name}”",
                details={"file_name": file_name, "folder_id": self._config.folder_id},
            )

        # The name is not forwarded, so FOUND_FILE carries None.
        content = self.read_file_by_id(files[0].id)
        self._cache_put(file_name, content)
        return content

    def read_file_by_id(
        self,
        file_id: str,
        file_name: Optional[str] = None,
        *,
        encoding: str = "utf-8",
        errors: str = "replace",
    ) -> str:
        """
        Download a file's content fully into memory.

        Bytes are decoded with ``encoding``; undecodable bytes follow the
        ``errors`` policy of ``bytes.decode`` (replaced by default).

        See https://developers.google.com/drive/v3/web/manage-downloads
        """
        self.ensure_access()

        params = {
            "fileId": file_id,
            "alt": ResponseAlt.MEDIA.value,
            "timeout": DOWNLOAD_TIMEOUT_MS,
        }
        data = self.get_file_content(params, file_name)
        if isinstance(data, (bytes, bytearray)):
            return bytes(data).decode(encoding, errors)
        return data

    # ----------------------------
    # Internals
    # ----------------------------
    def _execute(self, func: Callable[..., T], **kwargs: Any) -> T:
        try:
            return func(**kwargs)
        except HttpError as exc:
            info = http_error_to_info(exc)
            logger.warning(
                "[drive_client] non-success status; status:%s reason:%s",
                info.status_code,
                info.reason,
            )
            raise map_http_error(info, cause=exc) from exc

    def _cache_get(self, name: str) -> Optional[CacheEntry]:
        if self._cache is None:
            return None
        with self._cache_lock:
            return self._cache.get(name)

    def _cache_put(self, name: str, content: Any) -> None:
        if self._cache is None or not isinstance(content, str):
            return
        entry = CacheEntry(name=name, content=content)
        if entry.size > self._cache.maxsize:
            logger.debug(
                "[drive_client] not cached, larger than cache; name:%s size:%d",
                name,
                entry.size,
            )
            return
        with self._cache_lock:
            self._cache[name] = entry
        logger.debug("[drive_client] cached; name:%s size:%d", name, entry.size)


def _entry_size(entry: CacheEntry) -> int:
    return entry.size
