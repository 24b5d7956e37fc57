"""Recursive merge of user overrides into the resolved bundler configuration.

Policy, by the kinds of the two values under a shared key:

=================  =================  ===================================
base               override           result
=================  =================  ===================================
list / tuple       list / tuple       base items followed by override items
list / tuple       anything else      base items followed by the override
mapping            mapping            merged recursively, in place
anything else      anything           override value
=================  =================  ===================================

Keys present on only one side pass through unchanged.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping, MutableMapping
from typing import Any

_LIST_KINDS = (list, tuple)


def _merge_value(base: Any, override: Any) -> Any:
    if isinstance(base, _LIST_KINDS) and isinstance(override, _LIST_KINDS):
        return [*base, *copy.deepcopy(list(override))]
    if isinstance(base, _LIST_KINDS):
        return [*base, copy.deepcopy(override)]
    if isinstance(base, MutableMapping) and isinstance(override, Mapping):
        return merge_config(base, override)
    return copy.deepcopy(override)


def merge_config(
    base: MutableMapping[str, Any], override: Mapping[str, Any]
) -> MutableMapping[str, Any]:
    """Merge ``override`` into ``base`` in place and return ``base``.

    Override values are copied, so later mutation of ``base`` never leaks
    back into the caller's override object.
    """
    for key, value in override.items():
        if key in base:
            base[key] = _merge_value(base[key], value)
        else:
            base[key] = copy.deepcopy(value)
    return base
