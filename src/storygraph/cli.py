"""Command-line helpers for storygraph."""

from __future__ import annotations

import argparse
import logging
import subprocess
import sys
from pathlib import Path
from typing import Sequence

from .figure import build_figure
from .samples import jurassic_park
from .settings import DEFAULT_SETTINGS, LayoutSettings
from .timeline import TimelineDriver

logger = logging.getLogger(__name__)


def _app_path() -> Path:
    return Path(__file__).with_name("app.py")


def _launch_streamlit(
    app_path: Path | None = None,
    *,
    streamlit_args: Sequence[str] | None = None,
) -> None:
    """Start the Streamlit runtime for the packaged viewer."""

    target = app_path or _app_path()
    args = [sys.executable, "-m", "streamlit", "run", str(target)]
    if streamlit_args:
        args.extend(streamlit_args)

    subprocess.run(args, check=True)


def _run_smoke_test(timeout: float = 5.0) -> None:
    """Run a headless smoke test to ensure the viewer loads without errors."""

    from streamlit.testing.v1 import AppTest

    app_test = AppTest.from_file(str(_app_path()))
    app_test.run(timeout=timeout)

    if app_test.exception:
        print("Streamlit smoke test failed:", app_test.exception)
        raise SystemExit(1)


def _export_html(path: Path, *, settings: LayoutSettings | None = None) -> Path:
    """Render the sample story and write it as a standalone HTML page."""

    settings = settings or DEFAULT_SETTINGS
    story = jurassic_park()
    result = TimelineDriver(settings).render(story)
    figure = build_figure(result, settings=settings, title=story.title)
    figure.write_html(str(path), include_plotlyjs="cdn")
    logger.info("Wrote %d primitives for %d beats to %s", len(result.primitives), len(story.beats), path)
    return path


def main(argv: Sequence[str] | None = None) -> None:
    """Launch the Streamlit viewer, export a chart or run diagnostics."""

    parser = argparse.ArgumentParser(description="Draw character-proximity timelines")
    parser.add_argument(
        "--smoke-test",
        action="store_true",
        help="Run a quick headless Streamlit smoke test instead of launching the server.",
    )
    parser.add_argument(
        "--export",
        type=Path,
        metavar="PATH",
        help="Write the sample story to a standalone HTML file instead of launching the server.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument(
        "streamlit_args",
        nargs=argparse.REMAINDER,
        help=(
            "Any additional arguments after '--' are forwarded directly to Streamlit. "
            "Example: storygraph -- --server.headless true"
        ),
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.smoke_test:
        _run_smoke_test()
        return

    if args.export is not None:
        _export_html(args.export)
        return

    forwarded_args = [arg for arg in args.streamlit_args if arg != "--"] if args.streamlit_args else []

    _launch_streamlit(streamlit_args=forwarded_args)


if __name__ == "__main__":  # pragma: no cover
    main()
