from __future__ import annotations

"""cli.common

Small shared helpers for CLI command modules.

Every subcommand resolves its settings the same way: a ``--settings-file``
supplies the hosts and resources (with --user/--anonymous applied on top),
otherwise the environment (seeded from ``.env``) is overlaid with the
command-line flags.
"""

import argparse
import logging
import signal
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List

from sonar_sync.config import load_settings_file, settings_from_env
from sonar_sync.errors import SonarConfigError
from sonar_sync.progress import ProgressIndicator
from sonar_sync.types import ServerSettings


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def settings_from_args(args: argparse.Namespace) -> ServerSettings:
    """Single settings entry: environment defaults overlaid with CLI flags."""
    settings = settings_from_env()
    if getattr(args, "host", None):
        settings.host = args.host
    if getattr(args, "user", None):
        settings.user = args.user
    if getattr(args, "anonymous", False):
        settings.anonymous = True
    if getattr(args, "resource", None):
        settings.resource = args.resource
    return settings


def settings_list_from_args(args: argparse.Namespace) -> List[ServerSettings]:
    """Settings from ``--settings-file`` when given, with --user/--anonymous applied to every entry."""
    if not getattr(args, "settings_file", None):
        return [settings_from_args(args)]

    if getattr(args, "resource", None):
        raise SonarConfigError("--resource cannot be combined with --settings-file; list resources in the file")

    settings_list = load_settings_file(Path(args.settings_file), default_host=getattr(args, "host", None))
    for settings in settings_list:
        if getattr(args, "user", None):
            settings.user = args.user
        if getattr(args, "anonymous", False):
            settings.anonymous = True
    return settings_list


@contextmanager
def cancel_on_interrupt(indicator: ProgressIndicator) -> Iterator[ProgressIndicator]:
    """Turn Ctrl-C into a cooperative cancel for the duration of the block.

    A second Ctrl-C while a request is still blocked raises KeyboardInterrupt.
    """
    previous = signal.getsignal(signal.SIGINT)

    def _on_interrupt(signum, frame) -> None:
        if indicator.is_canceled():
            signal.signal(signal.SIGINT, previous)
            raise KeyboardInterrupt
        indicator.cancel()

    signal.signal(signal.SIGINT, _on_interrupt)
    try:
        yield indicator
    finally:
        signal.signal(signal.SIGINT, previous)
