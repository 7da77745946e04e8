"""Saving rendered drawings and opening them in the platform viewer."""

import logging
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

Runner = Callable[[Sequence[str]], object]

# macOS, Windows, Linux
OPENERS: tuple[tuple[str, ...], ...] = (
    ("open",),
    ("cmd", "/c", "start", ""),
    ("xdg-open",),
)


def run_command(cmd: Sequence[str]) -> subprocess.CompletedProcess:
    # No pipes: a backgrounded viewer would hold them open until it exits
    return subprocess.run(list(cmd), check=True, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)


def save(content: str, filename: str | Path = "output.html") -> Path:
    """Write rendered content to `filename` and return its path."""
    path = Path(filename)
    path.write_text(content, encoding="utf-8")
    logger.info("Drawing saved to %s", path)
    return path


def open_file(filename: str | Path = "output.html", runner: Runner = run_command) -> bool:
    """Try each platform opener in turn; False if none of them worked."""
    for opener in OPENERS:
        cmd = [*opener, str(filename)]
        try:
            runner(cmd)
        except (OSError, subprocess.CalledProcessError) as e:
            logger.debug("%s failed: %s", opener[0], e)
            continue
        return True

    logger.warning("Could not open the file automatically")
    return False


def publish(
    content: str,
    filename: str | Path = "output.html",
    show: bool = True,
    runner: Runner = run_command,
) -> Path | None:
    """Save content and optionally open it. Failures are logged, not raised."""
    try:
        path = save(content, filename)
    except OSError as e:
        logger.error("Could not save drawing to %s: %s", filename, e)
        return None

    if show:
        open_file(path, runner=runner)
    return path
