"""Integration tests — full build passes through ConfigResolver.

Exercises a build definition on disk, repeated passes over the same
project, and the manifest as seen by an independent reader.
"""

from __future__ import annotations

import json
from pathlib import Path

from assetmix.core.resolver import ConfigResolver

MIX_FILE = """\
mix.js(["resources/js/app.js", "resources/js/extra.js"], "public/js") \\
   .sass("resources/sass/app.scss", "public/css") \\
   .version() \\
   .webpack_config({"plugins": ["user-plugin"]})
"""


def _run_pass(make_resolver, argv=None) -> tuple[ConfigResolver, dict]:
    resolver = make_resolver(argv=argv)
    resolver.initialize()
    config = resolver.finalize(
        {
            "entry": resolver.resolve_entry(),
            "output": resolver.resolve_output().model_dump(by_alias=True),
            "plugins": ["extract-css:" + resolver.resolve_css_output()],
        }
    )
    return resolver, config


class TestFrameworkProjectBuild:
    def test_full_pass(self, make_resolver, framework_project: Path, write_file):
        write_file(framework_project, "webpack.mix.py", MIX_FILE)
        resolver, config = _run_pass(make_resolver)

        assert config == {
            "entry": {
                "app": [
                    "resources/js/app.js",
                    "resources/js/extra.js",
                    "resources/sass/app.scss",
                ]
            },
            "output": {
                "path": "public",
                "filename": "js/[name].[hash].js",
                "publicPath": "./",
            },
            "plugins": ["extract-css:css/app.[hash].css", "user-plugin"],
        }
        assert resolver.manifest.path == framework_project / "storage/framework/cache/Mix.json"

    def test_hot_pass_then_cold_pass(self, make_resolver, framework_project: Path, write_file):
        write_file(framework_project, "webpack.mix.py", MIX_FILE)
        marker = framework_project / "storage/framework/cache/hot"

        _, hot_config = _run_pass(make_resolver, argv=["--hot"])
        assert hot_config["output"]["path"] == "/"
        assert hot_config["output"]["publicPath"] == "http://localhost:8080/"
        assert marker.exists()

        _, cold_config = _run_pass(make_resolver)
        assert cold_config["output"]["path"] == "public"
        assert not marker.exists()

    def test_versioned_rebuilds(self, make_resolver, framework_project: Path, write_file):
        write_file(framework_project, "webpack.mix.py", MIX_FILE)
        emitted = write_file(framework_project, "public/css/app.css", "a{color:red}")
        manifest_file = framework_project / "storage/framework/cache/Mix.json"

        first, _ = _run_pass(make_resolver)
        hashed_one = first.version_asset("public/css/app.css", "css/app.css")
        again = first.version_asset("public/css/app.css", "css/app.css")
        assert hashed_one == again

        emitted.write_text("a{color:blue}", encoding="utf-8")
        second, _ = _run_pass(make_resolver)
        assert second.manifest.get("css/app.css") == hashed_one
        hashed_two = second.version_asset("public/css/app.css", "css/app.css")

        assert hashed_two != hashed_one
        assert json.loads(manifest_file.read_text(encoding="utf-8")) == {
            "css/app.css": hashed_two
        }
