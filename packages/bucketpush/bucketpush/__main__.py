"""Entry point: python -m bucketpush."""

from __future__ import annotations

import argparse
import logging
import sys

from bucketpush.core.context import PushContext
from bucketpush.core.errors import BucketPushError
from bucketpush.publishers import default_registry
from bucketpush.runtime.inputs import PushInputs
from bucketpush.runtime.source import SourceLocation
from bucketpush.runtime.ui import ConsoleUI
from bucketpush.schemas.docs import render_documentation
from bucketpush.settings import SettingsManager, StoreSettings

logger = logging.getLogger("bucketpush")


def _positive_seconds(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}") from None
    if not value > 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {raw}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bucketpush", description="Publish a build artifact to an object storage bucket"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--settings-dir", default=None, help="Directory holding settings.json")
    parser.add_argument("--publisher", default="objectstore", help="Publisher name")
    sub = parser.add_subparsers(dest="command", required=True)

    push = sub.add_parser("push", help="Upload an artifact and print its Artifact record")
    push.add_argument("--source", required=True, help="Artifact path, relative to --source-dir")
    push.add_argument("--name", required=True, help="Object name to create")
    push.add_argument("--bucket", required=True, help="Destination bucket")
    push.add_argument("--source-dir", default=".", help="Build output directory (default: .)")
    push.add_argument("--backend", choices=["s3", "local"], default=None, help="Store backend")
    push.add_argument("--endpoint-url", default=None, help="S3-compatible endpoint URL")
    push.add_argument("--region", default=None, help="Store region")
    push.add_argument("--local-root", default=None, help="Root directory of the local backend")
    push.add_argument("--timeout", type=_positive_seconds, default=None, help="Push deadline in seconds")

    sub.add_parser("docs", help="Print publisher documentation")
    return parser


def _resolve_settings(args: argparse.Namespace) -> StoreSettings:
    return SettingsManager(args.settings_dir).resolve({
        "backend": getattr(args, "backend", None),
        "endpoint_url": getattr(args, "endpoint_url", None),
        "region": getattr(args, "region", None),
        "local_root": getattr(args, "local_root", None),
    })


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(level=args.log_level)

    try:
        settings = _resolve_settings(args)
        publisher = default_registry().create(args.publisher, settings)

        if args.command == "docs":
            print(render_documentation(publisher.documentation(), title=publisher.name))
            return 0

        publisher.config_set({"source": args.source, "name": args.name, "bucket": args.bucket})
        inputs = PushInputs(
            context=PushContext(timeout=args.timeout),
            source=SourceLocation(path=args.source_dir),
            ui=ConsoleUI(sys.stderr),
        )
        artifact = publisher.push(inputs)
    except BucketPushError as exc:
        logger.debug("Push failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(artifact.model_dump_json())
    return 0


if __name__ == "__main__":
    sys.exit(main())
