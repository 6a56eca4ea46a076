"""Tests for H5P package extraction, library storage and the Hub client."""

import asyncio
from urllib.parse import parse_qs

import pytest

from leapwire.exceptions import PackageError, RetriesExhaustedError, ServerError
from leapwire.h5p import (
    H5PHubClient,
    H5PHubSettings,
    StorageProvider,
    StoredFile,
    detect_content_type,
    extract_package,
    library_storage_key,
    package_storage_key,
    upload_library,
    upload_package,
)

ACCORDION = {
    "title": "Accordion",
    "machineName": "H5P.Accordion",
    "majorVersion": 1,
    "minorVersion": "0",
    "patchVersion": "28",
    "runnable": 1,
    "preloadedDependencies": [
        {"machineName": "FontAwesome", "majorVersion": "4", "minorVersion": 5}
    ],
}
FONT_AWESOME = {
    "title": "Font Awesome",
    "machineName": "FontAwesome",
    "majorVersion": "4",
    "minorVersion": "5",
    "patchVersion": 4,
    "runnable": "0",
}
MANIFEST = {
    "title": "My accordion",
    "mainLibrary": "H5P.Accordion",
    "language": "en",
    "preloadedDependencies": [
        {"machineName": "H5P.Accordion", "majorVersion": 1, "minorVersion": 0}
    ],
}


class MemoryStorage:
    """In-memory StorageProvider."""

    def __init__(self, fail_on: str | None = None):
        self.objects: dict[str, StoredFile] = {}
        self.fail_on = fail_on
        self.active = 0
        self.peak = 0

    async def upload(self, file: StoredFile) -> None:
        self.active += 1
        self.peak = max(self.peak, self.active)
        try:
            await asyncio.sleep(0)
            if self.fail_on and file.key.endswith(self.fail_on):
                raise OSError(f"cannot write {file.key}")
            self.objects[file.key] = file
        finally:
            self.active -= 1

    async def download(self, key: str) -> bytes:
        return self.objects[key].data

    async def remove(self, key: str) -> None:
        self.objects.pop(key, None)

    async def list_by_prefix(self, prefix: str) -> list[str]:
        return sorted(key for key in self.objects if key.startswith(prefix))


@pytest.fixture
def package_bytes(make_h5p_archive) -> bytes:
    return make_h5p_archive(
        {
            "content/content.json": {"panels": []},
            "content/images/photo.png": b"\x89PNG",
            "H5P.Accordion-1.0/library.json": ACCORDION,
            "H5P.Accordion-1.0/js/accordion.js": "H5P.Accordion = {};",
            "H5P.Accordion-1.0/css/accordion.css": ".h5p-accordion {}",
            "FontAwesome-4.5/library.json": FONT_AWESOME,
            "FontAwesome-4.5/fonts/fa.woff2": b"wOF2",
            "README.txt": "not part of any library",
        },
        manifest=MANIFEST,
    )


def test_extract_package(package_bytes: bytes):
    package = extract_package(package_bytes)

    assert package.has_manifest
    assert package.manifest.title == "My accordion"
    assert package.manifest.mainLibrary == "H5P.Accordion"
    assert [lib.dir_name for lib in package.libraries] == [
        "FontAwesome-4.5",
        "H5P.Accordion-1.0",
    ]

    accordion = package.library("H5P.Accordion")
    assert accordion is not None
    assert accordion.descriptor.version == "1.0.28"
    assert accordion.descriptor.runnable == 1
    assert set(accordion.files) == {"library.json", "js/accordion.js", "css/accordion.css"}
    assert accordion.files["js/accordion.js"] == b"H5P.Accordion = {};"

    dependency = accordion.descriptor.preloadedDependencies[0]
    assert (dependency.machineName, dependency.version) == ("FontAwesome", "4.5")

    font_awesome = package.library("FontAwesome")
    assert font_awesome.descriptor.version == "4.5.4"
    assert font_awesome.descriptor.runnable == 0
    assert package.library("H5P.Missing") is None


def test_extract_package_without_manifest(make_h5p_archive):
    data = make_h5p_archive({"FontAwesome-4.5/library.json": FONT_AWESOME})

    package = extract_package(data)

    assert not package.has_manifest
    assert package.manifest.title == ""
    assert [lib.descriptor.machineName for lib in package.libraries] == ["FontAwesome"]


def test_extract_package_content_only(make_h5p_archive):
    package = extract_package(
        make_h5p_archive({"content/content.json": {}}, manifest=MANIFEST)
    )
    assert package.libraries == []


def test_extract_package_not_a_zip():
    with pytest.raises(PackageError, match="opening h5p zip"):
        extract_package(b"definitely not a zip archive")


def test_extract_package_bad_manifest(make_h5p_archive):
    data = make_h5p_archive({"h5p.json": "{not json"})

    with pytest.raises(PackageError, match="parsing h5p.json"):
        extract_package(data)


def test_extract_package_bad_library_json(make_h5p_archive):
    data = make_h5p_archive({"Broken-1.0/library.json": "{not json"})

    with pytest.raises(PackageError, match="parsing library.json in Broken-1.0"):
        extract_package(data)


def test_extract_package_library_without_machine_name(make_h5p_archive):
    data = make_h5p_archive({"Broken-1.0/library.json": {"majorVersion": 1}})

    with pytest.raises(PackageError, match="Broken-1.0"):
        extract_package(data)


def test_extract_package_bad_version(make_h5p_archive):
    data = make_h5p_archive(
        {"Broken-1.0/library.json": dict(FONT_AWESOME, majorVersion="four")}
    )

    with pytest.raises(PackageError, match="parsing library.json in Broken-1.0"):
        extract_package(data)


def test_storage_keys():
    assert (
        library_storage_key("H5P.Accordion", 1, 0, 28, "js/accordion.js")
        == "h5p-libraries/extracted/H5P.Accordion-1.0.28/js/accordion.js"
    )
    assert (
        package_storage_key("H5P.Accordion", 1, 0, 28)
        == "h5p-libraries/packages/H5P.Accordion-1.0.28.h5p"
    )


@pytest.mark.parametrize(
    ("path", "content_type"),
    [
        ("js/app.js", "application/javascript"),
        ("styles/app.css", "text/css"),
        ("library.json", "application/json"),
        ("index.htm", "text/html"),
        ("img/photo.jpeg", "image/jpeg"),
        ("img/icon.svg", "image/svg+xml"),
        ("fonts/fa.woff2", "font/woff2"),
        ("fonts/fa.woff", "font/woff"),
        ("fonts/fa.eot", "application/vnd.ms-fontobject"),
        ("LICENSE", "application/octet-stream"),
    ],
)
def test_detect_content_type(path, content_type):
    assert detect_content_type(path) == content_type


@pytest.mark.asyncio
async def test_upload_library(package_bytes: bytes):
    storage = MemoryStorage()
    assert isinstance(storage, StorageProvider)
    library = extract_package(package_bytes).library("H5P.Accordion")

    keys = await upload_library(storage, library, max_concurrency=2)

    prefix = "h5p-libraries/extracted/H5P.Accordion-1.0.28/"
    assert sorted(keys) == await storage.list_by_prefix(prefix)
    assert len(keys) == 3
    assert storage.objects[prefix + "css/accordion.css"].content_type == "text/css"
    assert storage.peak <= 2


@pytest.mark.asyncio
async def test_upload_library_failure_propagates(package_bytes: bytes):
    storage = MemoryStorage(fail_on="accordion.css")
    library = extract_package(package_bytes).library("H5P.Accordion")

    with pytest.raises(OSError, match="cannot write"):
        await upload_library(storage, library)


@pytest.mark.asyncio
async def test_upload_package(package_bytes: bytes):
    storage = MemoryStorage()
    library = extract_package(package_bytes).library("H5P.Accordion")

    key = await upload_package(storage, library, package_bytes)

    assert key == "h5p-libraries/packages/H5P.Accordion-1.0.28.h5p"
    assert await storage.download(key) == package_bytes
    assert storage.objects[key].content_type == "application/zip"


@pytest.fixture
def hub_client() -> H5PHubClient:
    return H5PHubClient(H5PHubSettings(backoff_multiplier=0.0))


@pytest.mark.asyncio
async def test_fetch_content_types(hub_client: H5PHubClient, httpx_mock):
    httpx_mock.add_response(
        method="POST",
        url="https://hub-api.h5p.org/v1/content-types/",
        json={
            "contentTypes": [
                {
                    "id": "H5P.Accordion",
                    "version": {"major": 1, "minor": 0, "patch": 28},
                    "coreApiVersionNeeded": {"major": 1, "minor": 24},
                    "title": "Accordion",
                    "isRecommended": True,
                    "popularity": 42,
                    "license": {"id": "MIT", "attributes": {"modifiable": True}},
                    "keywords": ["faq"],
                }
            ]
        },
    )

    response = await hub_client.fetch_content_types()

    form = parse_qs(httpx_mock.get_request().content.decode())
    assert form["type"] == ["local"]
    assert form["core_api_version"] == ["1.26"]
    assert "uuid" in form
    content_type = response.contentTypes[0]
    assert content_type.id == "H5P.Accordion"
    assert content_type.version.patch == 28
    assert content_type.license.attributes.modifiable


@pytest.mark.asyncio
async def test_download_package(hub_client: H5PHubClient, httpx_mock, package_bytes):
    httpx_mock.add_response(
        method="GET",
        url="https://hub-api.h5p.org/v1/content-types/H5P.Accordion",
        content=package_bytes,
    )

    data = await hub_client.download_package("H5P.Accordion")

    assert data == package_bytes
    assert httpx_mock.get_request().extensions["timeout"]["read"] == 300
    assert extract_package(data).has_manifest


@pytest.mark.asyncio
async def test_download_package_server_error(hub_client: H5PHubClient, httpx_mock):
    httpx_mock.add_response(status_code=502, is_reusable=True)

    with pytest.raises(RetriesExhaustedError) as exc_info:
        await hub_client.download_package("H5P.Accordion")

    assert isinstance(exc_info.value.last_error, ServerError)
