"""assetmix data models — all Pydantic v2, all frozen (immutable)."""

from assetmix.models.config import ModeFlags, OutputConfig
from assetmix.models.directives import (
    CombineDirective,
    Preprocessor,
    ScriptDirective,
    ScriptOutput,
    StyleDirective,
    StyleOutput,
)

__all__ = [
    # directives
    "Preprocessor",
    "ScriptOutput",
    "ScriptDirective",
    "StyleOutput",
    "StyleDirective",
    "CombineDirective",
    # config
    "OutputConfig",
    "ModeFlags",
]
