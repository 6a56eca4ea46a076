"""Persisting extracted H5P libraries through a byte storage provider.

The storage backend (S3, R2, local disk, ...) is not part of this package;
anything implementing ``StorageProvider`` can be passed in.
"""

import asyncio
import posixpath
from typing import Protocol, runtime_checkable

from pydantic import BaseModel

from ..gate import ConcurrencyGate
from ..log_config import logger
from .models import ExtractedLibrary

LIBRARY_UPLOAD_CONCURRENCY = 20
PACKAGE_CONTENT_TYPE = "application/zip"

_CONTENT_TYPES: tuple[tuple[tuple[str, ...], str], ...] = (
    ((".js",), "application/javascript"),
    ((".css",), "text/css"),
    ((".json",), "application/json"),
    ((".html", ".htm"), "text/html"),
    ((".png",), "image/png"),
    ((".jpg", ".jpeg"), "image/jpeg"),
    ((".gif",), "image/gif"),
    ((".svg",), "image/svg+xml"),
    ((".woff",), "font/woff"),
    ((".woff2",), "font/woff2"),
    ((".ttf",), "font/ttf"),
    ((".eot",), "application/vnd.ms-fontobject"),
)


class StoredFile(BaseModel):
    key: str
    content_type: str
    data: bytes


@runtime_checkable
class StorageProvider(Protocol):
    """Byte-oriented object storage."""

    async def upload(self, file: StoredFile) -> None: ...

    async def download(self, key: str) -> bytes: ...

    async def remove(self, key: str) -> None: ...

    async def list_by_prefix(self, prefix: str) -> list[str]: ...


def detect_content_type(file_path: str) -> str:
    """Maps a file extension to the content type it is served with."""
    for suffixes, content_type in _CONTENT_TYPES:
        if file_path.endswith(suffixes):
            return content_type
    return "application/octet-stream"


def _version(major: int, minor: int, patch: int) -> str:
    return f"{major}.{minor}.{patch}"


def library_storage_key(
    machine_name: str, major: int, minor: int, patch: int, file_path: str
) -> str:
    """Storage key of one extracted library file."""
    return posixpath.join(
        "h5p-libraries",
        "extracted",
        f"{machine_name}-{_version(major, minor, patch)}",
        file_path,
    )


def package_storage_key(machine_name: str, major: int, minor: int, patch: int) -> str:
    """Storage key of an original ``.h5p`` package."""
    return posixpath.join(
        "h5p-libraries",
        "packages",
        f"{machine_name}-{_version(major, minor, patch)}.h5p",
    )


async def upload_library(
    storage: StorageProvider,
    library: ExtractedLibrary,
    *,
    max_concurrency: int = LIBRARY_UPLOAD_CONCURRENCY,
) -> list[str]:
    """Uploads every file of ``library`` with bounded concurrency.

    Returns:
        list[str]: The storage keys written, in the library's file order.

    Raises:
        Exception: The first upload failure; uploads still pending are cancelled.
    """
    descriptor = library.descriptor
    gate = ConcurrencyGate(max_concurrency)
    files = [
        StoredFile(
            key=library_storage_key(
                descriptor.machineName,
                descriptor.majorVersion,
                descriptor.minorVersion,
                descriptor.patchVersion,
                rel_path,
            ),
            content_type=detect_content_type(rel_path),
            data=content,
        )
        for rel_path, content in library.files.items()
    ]

    async def _upload(file: StoredFile) -> None:
        async with gate:
            await storage.upload(file)

    try:
        async with asyncio.TaskGroup() as group:
            for file in files:
                group.create_task(_upload(file))
    except ExceptionGroup as eg:
        logger.error(
            f"Upload of {descriptor.machineName} {descriptor.version} failed: "
            f"{len(eg.exceptions)} error(s)"
        )
        raise eg.exceptions[0]

    logger.info(
        f"Uploaded {len(files)} file(s) of {descriptor.machineName} {descriptor.version}"
    )
    return [file.key for file in files]


async def upload_package(
    storage: StorageProvider, library: ExtractedLibrary, package_data: bytes
) -> str:
    """Stores the original ``.h5p`` archive next to its main library."""
    descriptor = library.descriptor
    key = package_storage_key(
        descriptor.machineName,
        descriptor.majorVersion,
        descriptor.minorVersion,
        descriptor.patchVersion,
    )
    await storage.upload(
        StoredFile(key=key, content_type=PACKAGE_CONTENT_TYPE, data=package_data)
    )
    return key
