"""Tests for merge_config — list append, recursive mappings, override wins."""

from __future__ import annotations

from assetmix.core.merge import merge_config


class TestMergeConfig:
    def test_lists_append(self):
        base = {"plugins": ["A"]}
        merge_config(base, {"plugins": ["B"]})
        assert base == {"plugins": ["A", "B"]}

    def test_merge_is_in_place(self):
        base = {"a": 1}
        result = merge_config(base, {"b": 2})
        assert result is base
        assert base == {"a": 1, "b": 2}

    def test_scalar_override_wins(self):
        base = {"devtool": "eval"}
        merge_config(base, {"devtool": "source-map"})
        assert base == {"devtool": "source-map"}

    def test_nested_mappings_recurse(self):
        base = {"output": {"path": "public", "filename": "[name].js"}, "module": {"rules": [1]}}
        merge_config(base, {"output": {"path": "dist"}, "module": {"rules": [2]}})
        assert base == {
            "output": {"path": "dist", "filename": "[name].js"},
            "module": {"rules": [1, 2]},
        }

    def test_unset_keys_pass_through(self):
        base = {"entry": {"app": ["a.js"]}}
        merge_config(base, {"resolve": {"alias": {"vue": "vue/dist/vue.js"}}})
        assert base["entry"] == {"app": ["a.js"]}
        assert base["resolve"] == {"alias": {"vue": "vue/dist/vue.js"}}

    def test_scalar_appended_to_list(self):
        base = {"externals": ["jquery"]}
        merge_config(base, {"externals": "lodash"})
        assert base == {"externals": ["jquery", "lodash"]}

    def test_mapping_appended_to_list(self):
        base = {"plugins": ["A"]}
        merge_config(base, {"plugins": {"name": "B"}})
        assert base == {"plugins": ["A", {"name": "B"}]}

    def test_scalar_base_replaced_by_list(self):
        base = {"externals": "jquery"}
        merge_config(base, {"externals": ["lodash"]})
        assert base == {"externals": ["lodash"]}

    def test_override_not_aliased(self):
        override = {"plugins": ["B"], "resolve": {"extensions": [".js"]}}
        base: dict = {}
        merge_config(base, override)
        base["resolve"]["extensions"].append(".vue")
        assert override["resolve"]["extensions"] == [".js"]
