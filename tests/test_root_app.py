"""Tests for the source-checkout entrypoint."""

from __future__ import annotations

import app
from storygraph import cli


def test_root_app_delegates_to_cli(monkeypatch):
    captured = {}

    def fake_main(argv=None):
        captured["argv"] = argv

    monkeypatch.setattr(cli, "main", fake_main)

    app.main(["--smoke-test"])

    assert captured["argv"] == ["--smoke-test"]
