from __future__ import annotations

import pytest

from storygraph import cli


@pytest.fixture
def recorded(monkeypatch):
    """Replace the Streamlit entrypoints with recorders."""

    calls: dict[str, object] = {}

    def record_launch(*, streamlit_args=None, app_path=None):
        calls["launch"] = list(streamlit_args or [])

    def record_smoke(timeout=5.0):
        calls["smoke"] = timeout

    monkeypatch.setattr(cli, "_launch_streamlit", record_launch)
    monkeypatch.setattr(cli, "_run_smoke_test", record_smoke)
    return calls


def test_smoke_flag_skips_server(recorded):
    cli.main(["--smoke-test"])

    assert recorded == {"smoke": 5.0}


@pytest.mark.parametrize(
    "argv, forwarded",
    [
        ([], []),
        (["--", "--server.headless", "true"], ["--server.headless", "true"]),
        (["-v", "--", "--server.port", "8600"], ["--server.port", "8600"]),
    ],
)
def test_viewer_receives_arguments_after_separator(recorded, argv, forwarded):
    cli.main(argv)

    assert recorded == {"launch": forwarded}


def test_export_writes_html_without_launching(recorded, tmp_path):
    target = tmp_path / "chart.html"

    cli.main(["--export", str(target)])

    assert recorded == {}
    assert "plotly" in target.read_text(encoding="utf-8").lower()
