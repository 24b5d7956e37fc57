"""assetmix: front-end asset build configuration orchestrator.

Collects per-asset build directives from a build-definition script, resolves
them into a single bundler configuration (entry points, output paths,
versioned filenames), and keeps a JSON manifest of logical asset names to
their currently built, optionally content-hashed, output paths.
"""

__version__ = "0.1.0"
__description__ = "Asset build configuration orchestrator with content-hash versioning"

from assetmix.core.manifest import Manifest
from assetmix.core.registry import MixApi
from assetmix.core.resolver import ConfigResolver
from assetmix.core.versioning import Versioning

__all__ = ["ConfigResolver", "Manifest", "MixApi", "Versioning", "__version__"]
