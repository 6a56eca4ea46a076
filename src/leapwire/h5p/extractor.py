"""Extraction of ``.h5p`` packages.

An H5P package is a zip archive with a root ``h5p.json`` manifest, a
``content/`` directory and one directory per bundled library, each holding a
``library.json`` descriptor. Extraction reads every file into memory, groups
files by their top-level directory and keeps the directories that are
libraries. Declared dependencies are parsed but not resolved.
"""

import io
import zipfile
import zlib

from pydantic import ValidationError

from ..exceptions import PackageError
from ..log_config import logger
from .models import (
    ExtractedLibrary,
    ExtractedPackage,
    LibraryDescriptor,
    PackageManifest,
)

MANIFEST_FILE = "h5p.json"
LIBRARY_DESCRIPTOR_FILE = "library.json"

_ENTRY_READ_ERRORS = (
    zipfile.BadZipFile,
    zlib.error,
    EOFError,
    OSError,
    NotImplementedError,
    RuntimeError,
)


def _read_entries(data: bytes) -> tuple[bytes | None, dict[str, dict[str, bytes]]]:
    """Returns the manifest bytes (if present) and the other files grouped
    by top-level directory."""
    try:
        archive = zipfile.ZipFile(io.BytesIO(data), metadata_encoding="utf-8")
    except (zipfile.BadZipFile, UnicodeDecodeError, OSError, EOFError) as e:
        raise PackageError(f"opening h5p zip: {e}") from e

    manifest_data: bytes | None = None
    dir_files: dict[str, dict[str, bytes]] = {}
    with archive:
        for info in archive.infolist():
            if info.is_dir():
                continue
            try:
                content = archive.read(info)
            except _ENTRY_READ_ERRORS as e:
                raise PackageError(f"reading zip entry {info.filename}: {e}") from e

            if info.filename == MANIFEST_FILE:
                manifest_data = content
                continue

            dir_name, sep, rel_path = info.filename.partition("/")
            if not sep or not rel_path:
                # Root-level files other than the manifest belong to no library
                continue
            dir_files.setdefault(dir_name, {})[rel_path] = content
    return manifest_data, dir_files


def extract_package(data: bytes) -> ExtractedPackage:
    """Extracts the manifest and every library of an ``.h5p`` archive.

    Args:
        data: The raw archive bytes.

    Returns:
        ExtractedPackage: The manifest (empty if ``h5p.json`` is missing) and
            the libraries, sorted by directory name. Directories without a
            ``library.json`` (such as ``content/``) are skipped.

    Raises:
        PackageError: If the archive is malformed, an entry cannot be read, or
            ``h5p.json`` / a ``library.json`` is not valid.
    """
    manifest_data, dir_files = _read_entries(data)

    package = ExtractedPackage()
    if manifest_data is not None:
        try:
            package.manifest = PackageManifest.model_validate_json(manifest_data)
        except ValidationError as e:
            raise PackageError(f"parsing {MANIFEST_FILE}: {e}") from e
        package.has_manifest = True
    else:
        logger.debug(f"Package has no {MANIFEST_FILE}, extracting libraries only")

    for dir_name in sorted(dir_files):
        files = dir_files[dir_name]
        descriptor_data = files.get(LIBRARY_DESCRIPTOR_FILE)
        if descriptor_data is None:
            logger.debug(
                f"Skipping non-library directory {dir_name}/ ({len(files)} files)"
            )
            continue
        try:
            descriptor = LibraryDescriptor.model_validate_json(descriptor_data)
        except ValidationError as e:
            raise PackageError(
                f"parsing {LIBRARY_DESCRIPTOR_FILE} in {dir_name}: {e}"
            ) from e
        package.libraries.append(
            ExtractedLibrary(descriptor=descriptor, files=files, dir_name=dir_name)
        )

    logger.info(
        f"Extracted H5P package '{package.manifest.title}' with "
        f"{len(package.libraries)} librar{'y' if len(package.libraries) == 1 else 'ies'}"
    )
    return package
