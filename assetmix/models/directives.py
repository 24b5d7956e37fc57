"""Build directive models — one requested build unit each."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Preprocessor(str, Enum):
    """Style preprocessors whose output is extracted into a stylesheet."""

    SASS = "sass"
    LESS = "less"


class ScriptOutput(BaseModel):
    """Where a script bundle is emitted: bundle ``name`` inside ``base``."""

    model_config = ConfigDict(frozen=True)

    name: str
    base: str


class ScriptDirective(BaseModel):
    """An ordered list of entry sources compiled into one bundle."""

    model_config = ConfigDict(frozen=True)

    entry: list[str] = Field(min_length=1)
    output: ScriptOutput


class StyleOutput(BaseModel):
    """Plain and ``[hash]``-templated output paths of a stylesheet."""

    model_config = ConfigDict(frozen=True)

    path: str
    hashed_path: str


class StyleDirective(BaseModel):
    """A single preprocessor source compiled to one stylesheet."""

    model_config = ConfigDict(frozen=True)

    preprocessor: Preprocessor
    src: str
    output: StyleOutput


class CombineDirective(BaseModel):
    """Plain concatenation of ``src`` files into ``output`` (never hashed)."""

    model_config = ConfigDict(frozen=True)

    src: list[str] = Field(min_length=1)
    output: str
