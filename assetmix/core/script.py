"""Build-definition script loader.

The script is plain Python executed for its side effects. It sees a single
global, ``mix``, bound to the directive-registration handle::

    # webpack.mix.py
    mix.js(["resources/assets/js/app.js"], "public/js").version()
"""

from __future__ import annotations

import logging
import runpy
from pathlib import Path

from assetmix.core.registry import MixApi
from assetmix.exceptions import MixError

logger = logging.getLogger(__name__)


class MixFileNotFound(MixError):
    """Raised when the build-definition script does not exist."""


def load_mix_file(path: Path, api: MixApi) -> None:
    """Execute the build-definition script at ``path`` against ``api``.

    Exceptions raised by the script propagate unchanged.
    """
    path = Path(path)
    if not path.is_file():
        raise MixFileNotFound(f"Build definition not found: {path}")
    logger.info("Loading build definition %s", path)
    runpy.run_path(str(path), init_globals={"mix": api}, run_name="__mix__")
