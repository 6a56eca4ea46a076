"""Models for H5P packages and the H5P Hub API.

``h5p.json`` and ``library.json`` encode version numbers inconsistently,
sometimes as ``1`` and sometimes as ``"1"``, so every version field is a
``FlexInt``.
"""

from pydantic import BaseModel, ConfigDict, Field

from ..models import FlexInt


class LibraryDependency(BaseModel):
    """A declared dependency edge (machine name plus major.minor version)."""

    machineName: str
    majorVersion: FlexInt = 0
    minorVersion: FlexInt = 0
    model_config = ConfigDict(extra="allow")

    @property
    def version(self) -> str:
        return f"{self.majorVersion}.{self.minorVersion}"


class _Dependencies(BaseModel):
    preloadedDependencies: list[LibraryDependency] = Field(default_factory=list)
    dynamicDependencies: list[LibraryDependency] = Field(default_factory=list)
    editorDependencies: list[LibraryDependency] = Field(default_factory=list)
    model_config = ConfigDict(extra="allow")


class PackageManifest(_Dependencies):
    """The root ``h5p.json`` of a package.

    Attributes:
        title: Content title.
        mainLibrary: Machine name of the library that runs the content.
        machineName: Present on library-only packages.
    """

    title: str = ""
    mainLibrary: str | None = None
    machineName: str | None = None
    majorVersion: FlexInt = 0
    minorVersion: FlexInt = 0
    patchVersion: FlexInt = 0
    runnable: FlexInt = 0


class LibraryDescriptor(_Dependencies):
    """A library's ``library.json``."""

    title: str = ""
    machineName: str
    majorVersion: FlexInt = 0
    minorVersion: FlexInt = 0
    patchVersion: FlexInt = 0
    runnable: FlexInt = 0
    description: str | None = None

    @property
    def version(self) -> str:
        return f"{self.majorVersion}.{self.minorVersion}.{self.patchVersion}"


class ExtractedLibrary(BaseModel):
    """One library directory of a package.

    Attributes:
        descriptor: The parsed ``library.json``.
        files: Path relative to the library directory mapped to file content,
            ``library.json`` included.
        dir_name: Directory name inside the archive, e.g. "H5P.Accordion-1.0".
    """

    descriptor: LibraryDescriptor
    files: dict[str, bytes]
    dir_name: str


class ExtractedPackage(BaseModel):
    """A package split into its manifest and its libraries.

    When the archive has no ``h5p.json``, ``manifest`` is an empty
    ``PackageManifest`` and ``has_manifest`` is False.
    """

    manifest: PackageManifest = Field(default_factory=PackageManifest)
    has_manifest: bool = False
    libraries: list[ExtractedLibrary] = Field(default_factory=list)

    def library(self, machine_name: str) -> ExtractedLibrary | None:
        """Returns the first library with the given machine name, if any."""
        for library in self.libraries:
            if library.descriptor.machineName == machine_name:
                return library
        return None


# --- H5P Hub ---


class HubVersion(BaseModel):
    major: int = 0
    minor: int = 0
    patch: int = 0


class HubScreenshot(BaseModel):
    url: str = ""
    alt: str = ""


class HubLicenseAttributes(BaseModel):
    useCommercially: bool = False
    modifiable: bool = False
    distributable: bool = False
    sublicensable: bool = False
    canHoldLiable: bool = False
    mustIncludeCopyright: bool = False
    mustIncludeLicense: bool = False


class HubLicense(BaseModel):
    id: str = ""
    attributes: HubLicenseAttributes = Field(default_factory=HubLicenseAttributes)


class HubContentType(BaseModel):
    """A content type listed by the H5P Hub.

    Attributes:
        id: The machine name, e.g. "H5P.Accordion".
        version: Latest version available on the Hub.
        coreApiVersionNeeded: Minimum H5P core API version.
    """

    id: str
    version: HubVersion = Field(default_factory=HubVersion)
    coreApiVersionNeeded: HubVersion = Field(default_factory=HubVersion)
    title: str = ""
    summary: str = ""
    description: str = ""
    icon: str = ""
    createdAt: str | None = None
    updatedAt: str | None = None
    isRecommended: bool = False
    popularity: int = 0
    screenshots: list[HubScreenshot] | None = None
    license: HubLicense | None = None
    owner: str = ""
    example: str = ""
    tutorial: str = ""
    keywords: list[str] | None = None
    categories: list[str] | None = None
    model_config = ConfigDict(extra="allow")


class HubResponse(BaseModel):
    contentTypes: list[HubContentType] = Field(default_factory=list)
    model_config = ConfigDict(extra="allow")
