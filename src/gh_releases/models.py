"""GitHub domain models for repositories, releases and assets.

Each model is built from decoded JSON with ``from_api_response``. A payload
of the wrong shape raises ``TypeError`` or ``ValueError`` instead of
producing a partially populated object.
"""

from dataclasses import dataclass
from typing import Any


def _expect_object(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        msg = f"expected {what} object, got {type(data).__name__}"
        raise TypeError(msg)
    return data


def _string_field(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"field {key!r} must be a string, got {type(value).__name__}"
        raise TypeError(msg)
    return value


@dataclass(slots=True, frozen=True)
class RepositoryInfo:
    """Repository description and homepage."""

    description: str
    homepage: str

    @classmethod
    def from_api_response(cls, data: Any) -> "RepositoryInfo":
        """Create RepositoryInfo from GitHub API response data.

        Args:
            data: Decoded JSON of ``GET /repos/{repo}``

        Returns:
            RepositoryInfo instance

        Raises:
            TypeError: If the payload is not a repository object

        """
        repo = _expect_object(data, "repository")
        return cls(
            description=_string_field(repo, "description"),
            homepage=_string_field(repo, "homepage"),
        )


@dataclass(slots=True, frozen=True)
class Asset:
    """Represents a GitHub release asset.

    Attributes:
        name: Asset filename
        url: API URL that serves the asset's binary content

    """

    name: str
    url: str

    @classmethod
    def from_api_response(cls, data: Any) -> "Asset":
        """Create Asset from GitHub API response data."""
        asset = _expect_object(data, "asset")
        return cls(
            name=_string_field(asset, "name"),
            url=_string_field(asset, "url"),
        )


@dataclass(slots=True, frozen=True)
class Release:
    """Represents a GitHub release and its assets.

    Attributes:
        tag_name: Tag the release was published from
        assets: Release assets in the order the API returned them

    """

    tag_name: str
    assets: tuple[Asset, ...] = ()

    @classmethod
    def from_api_response(cls, data: Any) -> "Release":
        """Create Release from GitHub API response data.

        Args:
            data: Decoded JSON of a single release

        Returns:
            Release instance

        Raises:
            TypeError: If the payload or its assets have the wrong shape

        """
        release = _expect_object(data, "release")
        raw_assets = release.get("assets")
        if raw_assets is None:
            raw_assets = []
        if not isinstance(raw_assets, list):
            msg = (
                "field 'assets' must be a list, "
                f"got {type(raw_assets).__name__}"
            )
            raise TypeError(msg)

        return cls(
            tag_name=_string_field(release, "tag_name"),
            assets=tuple(Asset.from_api_response(a) for a in raw_assets),
        )

    @classmethod
    def list_from_api_response(cls, data: Any) -> list["Release"]:
        """Create a list of releases from a ``/releases`` response."""
        if not isinstance(data, list):
            msg = f"expected release list, got {type(data).__name__}"
            raise TypeError(msg)
        return [cls.from_api_response(entry) for entry in data]

    @property
    def version(self) -> str:
        """Extract version from tag name."""
        return self.tag_name.removeprefix("v")

    def find_asset(self, name: str) -> Asset | None:
        """Return the first asset called ``name``, if any."""
        for asset in self.assets:
            if asset.name == name:
                return asset
        return None
