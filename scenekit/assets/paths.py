"""Identifier to source-location convention."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_ASSET_ROOT = "assets"
DEFAULT_MODEL_EXTENSION = "glb"


def validate_identifier(identifier: str) -> str:
    """Return identifier unchanged or raise ValueError when it cannot name a file."""
    if not isinstance(identifier, str) or not identifier:
        raise ValueError("asset identifier must be a non-empty string")
    if identifier in {".", ".."} or "/" in identifier or "\\" in identifier:
        raise ValueError(f"asset identifier must be a plain file stem: {identifier!r}")
    return identifier


def normalize_extension(extension: str) -> str:
    """Strip leading dots; raise ValueError when nothing is left."""
    suffix = extension.lstrip(".")
    if not suffix:
        raise ValueError(f"model extension must not be empty: {extension!r}")
    return suffix


def resolve_asset_path(
    identifier: str,
    *,
    root: str | Path = DEFAULT_ASSET_ROOT,
    extension: str = DEFAULT_MODEL_EXTENSION,
) -> Path:
    """Map ``name`` to ``<root>/name.<extension>``."""
    validate_identifier(identifier)
    return Path(root) / f"{identifier}.{normalize_extension(extension)}"


@dataclass(frozen=True, slots=True)
class AssetRequest:
    """One load request: identifier plus the location derived from it."""

    identifier: str
    path: Path

    @classmethod
    def for_identifier(
        cls,
        identifier: str,
        *,
        root: str | Path = DEFAULT_ASSET_ROOT,
        extension: str = DEFAULT_MODEL_EXTENSION,
    ) -> AssetRequest:
        return cls(
            identifier=identifier,
            path=resolve_asset_path(identifier, root=root, extension=extension),
        )
