"""H5P package extraction, library storage and the H5P Hub client."""

from .config import H5PHubSettings, get_h5p_hub_settings
from .extractor import extract_package
from .hub import H5PHubClient
from .models import (
    ExtractedLibrary,
    ExtractedPackage,
    HubContentType,
    HubResponse,
    LibraryDependency,
    LibraryDescriptor,
    PackageManifest,
)
from .storage import (
    StorageProvider,
    StoredFile,
    detect_content_type,
    library_storage_key,
    package_storage_key,
    upload_library,
    upload_package,
)

__all__ = [
    "ExtractedLibrary",
    "ExtractedPackage",
    "H5PHubClient",
    "H5PHubSettings",
    "HubContentType",
    "HubResponse",
    "LibraryDependency",
    "LibraryDescriptor",
    "PackageManifest",
    "StorageProvider",
    "StoredFile",
    "detect_content_type",
    "extract_package",
    "get_h5p_hub_settings",
    "library_storage_key",
    "package_storage_key",
    "upload_library",
    "upload_package",
]
