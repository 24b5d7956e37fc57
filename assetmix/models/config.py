"""Resolved configuration models handed to the bundler."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from assetmix.models.directives import Preprocessor


class OutputConfig(BaseModel):
    """The bundler's output descriptor.

    Serialize with ``model_dump(by_alias=True)`` to get the bundler's
    ``publicPath`` key.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    path: str
    filename: str
    public_path: str = Field(alias="publicPath")


class ModeFlags(BaseModel):
    """Snapshot of the process-wide mode flags for one build pass."""

    model_config = ConfigDict(frozen=True)

    hmr: bool = False
    in_production: bool = False
    sourcemaps: bool = False
    notifications: bool = True
    versioning: bool = False
    css_preprocessor: Preprocessor | None = None
