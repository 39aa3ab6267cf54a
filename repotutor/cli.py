"""CLI entrypoints for repotutor commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import PROVIDER_KINDS, ConfigError, apply_overrides, load_config
from .logging import configure_logging
from .models import TUTORIAL_FORMATS
from .orchestrator import Orchestrator


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to .repotutor.yml or the directory containing it (defaults to the current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repotutor",
        description="Generate tutorials and learning journeys from repository snapshots.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a tutorial for a repository URL or local path.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_config_option(generate_parser)
    generate_parser.add_argument("url", help="Repository URL (or directory for the local provider).")
    generate_parser.add_argument(
        "--format",
        choices=TUTORIAL_FORMATS,
        default=None,
        help="Tutorial format (defaults to the configured format).",
    )
    generate_parser.add_argument(
        "--provider",
        choices=PROVIDER_KINDS,
        default=None,
        help="Snapshot provider to use.",
    )
    generate_parser.add_argument(
        "--endpoint",
        default=None,
        help="Snapshot endpoint URL for the http provider.",
    )
    generate_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the tutorial to this file instead of stdout.",
    )

    agents_parser = subparsers.add_parser(
        "agents",
        help="List the pipeline agents and their roles.",
    )
    _add_verbose_option(agents_parser, suppress_default=True)
    _add_config_option(agents_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for repotutor commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    if args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port, log_level="debug" if args.verbose else None)
        return

    try:
        config = load_config(args.config)
        if args.command == "generate":
            config = apply_overrides(
                config,
                provider_kind=args.provider,
                endpoint=args.endpoint,
                tutorial_format=args.format,
            )
    except ConfigError as exc:
        parser.exit(2, f"repotutor: configuration error: {exc}\n")

    orchestrator = Orchestrator(config=config)

    if args.command == "generate":
        result = orchestrator.generate_tutorial(args.url)
        if not result.success or result.document is None:
            parser.exit(1, f"{result.error}\n")
        rendered = result.document.render()
        if args.output is not None:
            args.output.parent.mkdir(parents=True, exist_ok=True)
            args.output.write_text(rendered if rendered.endswith("\n") else rendered + "\n", encoding="utf-8")
            print(f"Tutorial written to {_relativize(args.output.resolve())}")
        else:
            print(rendered)
    elif args.command == "agents":
        print(json.dumps(orchestrator.get_agents_status(), indent=2))
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
