"""CLI entrypoints for joborg commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, JobOrgConfig, load_config
from .logging import configure_logging
from .pipeline import Pipeline
from .reorganizer import ReorganizeError
from .stores import RecordStore, StoreError
from .techstack import extract_tech_stack


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in {"true", "yes", "1"}:
        return True
    if lowered in {"false", "no", "0"}:
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got {value!r}")


def _verbosity_parent() -> argparse.ArgumentParser:
    # SUPPRESS keeps a subcommand from resetting a top-level --verbose.
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Log per-file classification and copy decisions.",
    )
    return parent


def _store_parent() -> argparse.ArgumentParser:
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--config",
        default=".",
        help="Path to .joborg.yml or the directory containing it (defaults to current directory).",
    )
    parent.add_argument("--db", help="Record store file; overrides paths.store.")
    return parent


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="joborg",
        description="Classify job descriptions, organize them by priority and rank the best opportunities.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log per-file classification and copy decisions.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    verbosity = _verbosity_parent()
    store = _store_parent()

    run_parser = subparsers.add_parser(
        "run",
        parents=[verbosity, store],
        help="Scan the source tree, rebuild the organized tree and the report.",
    )
    run_parser.add_argument("--src", help="Source directory; overrides paths.source.")
    run_parser.add_argument("--dest", help="Destination directory; overrides paths.destination.")

    subparsers.add_parser(
        "report",
        parents=[verbosity, store],
        help="Rewrite the ranked report from the existing record store.",
    )

    mark_parser = subparsers.add_parser(
        "mark",
        parents=[verbosity, store],
        help="Mark a work's application status.",
    )
    mark_parser.add_argument("--id", dest="work_id", required=True, help="Stored path of the work.")
    mark_parser.add_argument(
        "--status",
        type=_parse_bool,
        required=True,
        help="Set status to applied (true) or not applied (false).",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        parents=[verbosity, store],
        help="Serve stored works to the viewer over HTTP.",
    )
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    tech_parser = subparsers.add_parser(
        "tech",
        parents=[verbosity],
        help="List the technologies mentioned in a job description file.",
    )
    tech_parser.add_argument("path", help="Text file to inspect.")

    return parser



def _load(parser: argparse.ArgumentParser, args: argparse.Namespace) -> JobOrgConfig:
    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    return config.with_overrides(
        src=getattr(args, "src", None),
        dest=getattr(args, "dest", None),
        db=getattr(args, "db", None),
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for joborg commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "tech":
        configure_logging(verbose=bool(args.verbose))
        try:
            text = Path(args.path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            parser.exit(1, f"Could not read {args.path}: {exc}\n")
        for name in extract_tech_stack(text):
            print(name)
        return

    config = _load(parser, args)
    configure_logging(config, verbose=bool(args.verbose))

    if args.command == "run":
        try:
            outcome = Pipeline().run(config)
        except (FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"{exc}\n")
        except (ConfigError, StoreError, ReorganizeError) as exc:
            parser.exit(1, f"joborg run failed: {exc}\nRun with --verbose for more details.\n")
        except OSError as exc:
            parser.exit(1, f"joborg run failed: {exc}\n")
        print(
            f"Organized {len(outcome.reorganize.placed)} files into {_relativize(config.destination_dir)}"
        )
        print(f"Report written to {_relativize(outcome.report_path)}")
    elif args.command == "report":
        try:
            entries = Pipeline().report(config)
        except (StoreError, OSError) as exc:
            parser.exit(1, f"joborg report failed: {exc}\n")
        print(f"Ranked {len(entries)} opportunities in {_relativize(config.report_path)}")
    elif args.command == "mark":
        try:
            view = RecordStore(config.db_path).set_applied(args.work_id, args.status)
        except KeyError:
            parser.exit(1, f"No stored work with id {args.work_id}\n")
        except StoreError as exc:
            parser.exit(1, f"joborg mark failed: {exc}\n")
        state = "applied" if view.applied else "not applied"
        print(f"{view.title} marked as {state}")
    elif args.command == "serve":
        from .service import run_service

        run_service(config.db_path, host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
