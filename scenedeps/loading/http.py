# scenedeps/loading/http.py
from __future__ import annotations

import logging
from types import TracebackType
from typing import Callable, Optional, Type

import httpx
from PIL import Image

from scenedeps.loading.binary import decode_text, is_gltf_binary
from scenedeps.loading.textures import TextureData, TextureImporter
from scenedeps.settings import ImportSettings

logger = logging.getLogger(__name__)


class HttpBufferDownload:
    """Buffer fetched over HTTP."""

    def __init__(
        self,
        uri: str,
        data: Optional[bytes],
        error: Optional[str] = None,
        sniffer: Callable[[bytes], bool] = is_gltf_binary,
    ) -> None:
        self.uri = uri
        self._sniffer = sniffer
        self._data = data
        self._error = error
        self._disposed = False

    @property
    def success(self) -> bool:
        return self._data is not None

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def data(self) -> Optional[bytes]:
        return self._data

    @property
    def text(self) -> Optional[str]:
        if self._data is None:
            return None
        return decode_text(self._data)

    @property
    def is_binary(self) -> Optional[bool]:
        if self._data is None:
            return None
        return self._sniffer(self._data)

    def dispose(self) -> None:
        self._data = None
        self._disposed = True

    def __enter__(self) -> HttpBufferDownload:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.dispose()


class HttpTextureDownload:
    """Texture fetched over HTTP and decoded on arrival."""

    def __init__(
        self,
        uri: str,
        texture: Optional[TextureData],
        non_readable: bool,
        error: Optional[str] = None,
    ) -> None:
        self.uri = uri
        self._texture = texture
        self._non_readable = non_readable
        self._error = error
        self._disposed = False

    @property
    def success(self) -> bool:
        return self._texture is not None

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def texture(self) -> Optional[TextureData]:
        return self._texture

    @property
    def non_readable(self) -> bool:
        return self._non_readable

    def dispose(self) -> None:
        self._texture = None
        self._disposed = True

    def __enter__(self) -> HttpTextureDownload:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.dispose()


class HttpDownloadProvider:
    """
    Runtime download provider backed by an `httpx.AsyncClient`.

    Network failures end up on the returned download; nothing is raised.
    A client passed in by the caller is left open by `aclose()`.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        settings: Optional[ImportSettings] = None,
        importer: Optional[TextureImporter] = None,
        sniffer: Callable[[bytes], bool] = is_gltf_binary,
    ) -> None:
        self._sniffer = sniffer
        self.settings = settings or ImportSettings()
        self._client = client
        self._owns_client = client is None
        self._importer = importer or TextureImporter()

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.settings.http_timeout, follow_redirects=True
            )
        return self._client

    async def _fetch(self, uri: str) -> tuple[Optional[bytes], Optional[str]]:
        try:
            response = await self.client.get(uri)
        except httpx.HTTPError as e:
            error = f"Download of {uri} failed: {e}"
            logger.warning(error)
            return None, error

        if not response.is_success:
            error = f"HTTP {response.status_code} for {uri}"
            logger.warning(error)
            return None, error

        logger.debug("Downloaded %d bytes from %s", len(response.content), uri)
        return response.content, None

    async def request(self, uri: object) -> HttpBufferDownload:
        key = str(uri)
        data, error = await self._fetch(key)
        return HttpBufferDownload(key, data, error, self._sniffer)

    async def request_texture(
        self, uri: object, non_readable: bool = False
    ) -> HttpTextureDownload:
        key = str(uri)
        data, error = await self._fetch(key)
        if data is None:
            return HttpTextureDownload(key, None, non_readable, error)

        try:
            texture = self._importer.import_bytes(data)
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            error = f"Couldn't decode texture at {key}"
            logger.warning("%s: %s", error, e)
            return HttpTextureDownload(key, None, non_readable, error)

        return HttpTextureDownload(key, texture, non_readable)

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpDownloadProvider:
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()
