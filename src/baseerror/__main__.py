"""Command-line entrypoint: show effective settings and a sample rendering."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from baseerror import ConfigurationError, __version__, new_code_wrap, with_chain, with_stack
from baseerror.config import Settings, cfg, load_config_with_env


def _safe_message_filter(record: Any) -> bool:
    """Escape braces/angles in log messages to prevent format/tag errors."""
    if isinstance(record.get("message"), str):
        msg = record["message"]
        msg = msg.replace("{", "{{").replace("}", "}}").replace("<", "\\<")
        record["message"] = msg
    return True


def setup_logging(verbose: bool = False) -> None:
    """Configure loguru and enable this package's diagnostics.
    Level: verbose=True or LOG_LEVEL=DEBUG enables DEBUG; otherwise INFO."""
    level = "INFO"
    if verbose:
        level = "DEBUG"
    else:
        env_level = (os.environ.get("LOG_LEVEL") or "").upper()
        if env_level in ("DEBUG", "INFO", "WARNING", "ERROR"):
            level = env_level

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=("<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan> | {message}"),
        filter=_safe_message_filter,
    )
    logger.enable("baseerror")


def reload_config(config_path: Path) -> Settings:
    """Load config from path and update global cfg."""
    data = load_config_with_env(config_path)
    cfg.reload(data)
    return cfg


def render_sample() -> str:
    """Verbose dump of a wrapped error, as operators would see it in logs."""
    try:
        raise OSError("disk full")
    except OSError as exc:
        err = new_code_wrap("SAMPLE", exc, with_chain("cli", "render_sample"), with_stack())
    if err is None:
        return ""
    return format(err, "+v")


def main(argv: list[str] | None = None) -> int:
    """Main entrypoint."""
    parser = argparse.ArgumentParser(description="baseerror: inspect structured error settings")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("baseerror.yaml"),
        help="Path to config file (default: baseerror.yaml)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--show-sample",
        action="store_true",
        help="Render a sample error in verbose form",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    try:
        settings = reload_config(args.config)
    except (ConfigurationError, yaml.YAMLError) as exc:
        logger.error("Invalid config {}: {}", args.config, exc)
        return 1
    logger.info("Settings loaded from {}", args.config)

    print(yaml.safe_dump(settings.as_dict(), sort_keys=True), end="")
    if args.show_sample:
        print(render_sample())
    return 0


if __name__ == "__main__":
    sys.exit(main())
