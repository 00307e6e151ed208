"""`transient-pager`: view a file and pop transient help/info surfaces over it."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

from transient import __version__
from transient.api.config import TransientConfig, TransientLoggingConfig
from transient.api.input_events import InputEvent, KeyEvent
from transient.runtime.config import load_logging_config, load_transient_config, parse_auto_restore_delay
from transient.runtime.controller import TransientLoopController
from transient.runtime.logging import configure_transient_logging, shutdown_transient_logging

if TYPE_CHECKING:
    from transient.window.curses_terminal import CursesTerminalHost

_LOG = logging.getLogger("transient.cli")
BASE_SURFACE = "main"

HELP_TEXT = """\
Keys while the base view is focused:
  ?      show this help
  i      show file statistics
  j / k  scroll the base view
  Q      quit (lowercase q is left for transient surfaces)

Keys inside a transient surface:
  space      next page (wraps to the top at the end)
  backspace  previous page (wraps to the end at the top)
  q          close the surface and restore the layout now
  any other  close the loop; the key is handled by the base view
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="transient-pager", description=__doc__)
    parser.add_argument("path", type=Path, help="Text file shown in the base view.")
    parser.add_argument("--version", action="version", version=f"transient-pager {__version__}")
    parser.add_argument(
        "--delay",
        type=parse_auto_restore_delay,
        default=None,
        help="Auto-restore delay in seconds, or 'never'. Defaults to TRANSIENT_AUTO_RESTORE_DELAY or 1.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level; enables logging to --log-file.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Log file path (default: transient-pager.log when --log-level is set).",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> TransientConfig:
    config = load_transient_config()
    if args.delay is not None:
        config = replace(config, auto_restore_delay_seconds=args.delay)
    return config


def resolve_logging_config(args: argparse.Namespace) -> TransientLoggingConfig:
    """Terminal UI owns the console, so logs only go to a file."""
    config = replace(load_logging_config(), console_enabled=False)
    if args.log_level:
        config = replace(config, level_name=str(args.log_level).upper())
        if args.log_file is None and config.file_path is None:
            config = replace(config, file_path="transient-pager.log")
    if args.log_file is not None:
        config = replace(config, file_path=str(args.log_file))
    return config


def file_statistics(path: Path, text: str) -> str:
    lines = text.splitlines()
    longest = max((len(line) for line in lines), default=0)
    return (
        f"path:    {path}\n"
        f"lines:   {len(lines)}\n"
        f"words:   {len(text.split())}\n"
        f"chars:   {len(text)}\n"
        f"longest: {longest}\n"
    )


class PagerApp:
    """Base-view key loop that opens transient surfaces through the controller."""

    def __init__(
        self,
        host: "CursesTerminalHost",
        controller: TransientLoopController,
        path: Path,
        text: str,
    ) -> None:
        self._host = host
        self._controller = controller
        self._path = path
        self._text = text

    def run(self) -> int:
        self._host.set_base_text(self._text)
        self._host.set_status(f"{self._path}  (? for help)")
        while True:
            event = self._host.read_next_input_event()
            if not self.handle(event):
                return 0

    def handle(self, event: InputEvent) -> bool:
        """Return False to quit."""
        if not isinstance(event, KeyEvent):
            return True
        key = event.value
        if key == "Q":
            return False
        if key == "?":
            self._controller.display("*help*", lambda: print(HELP_TEXT, end=""))
        elif key == "i":
            self._controller.display("*info*", lambda: print(file_statistics(self._path, self._text), end=""))
        elif key in {"j", "k"}:
            self._scroll_base(1 if key == "j" else -1)
        return True

    def _scroll_base(self, delta: int) -> None:
        viewport = self._host.surface_viewport(BASE_SURFACE)
        self._host.scroll_surface_to(BASE_SURFACE, viewport.top_line + delta)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        text = args.path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        print(f"transient-pager: cannot read {args.path}: {exc}")
        return 2

    config = resolve_config(args)
    configure_transient_logging(resolve_logging_config(args))
    _LOG.info("starting pager for %s (auto-restore %s)", args.path, config.auto_restore_delay_seconds)

    from transient.window.curses_terminal import run_terminal

    def _app(host: "CursesTerminalHost") -> int:
        controller = TransientLoopController(host, config)
        return PagerApp(host, controller, args.path, text).run()

    try:
        return run_terminal(_app)
    except KeyboardInterrupt:
        return 130
    finally:
        shutdown_transient_logging()


if __name__ == "__main__":
    raise SystemExit(main())
