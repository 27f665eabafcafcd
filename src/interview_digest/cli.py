"""Command line interface for the interview digest pipeline."""

import argparse
import io
import logging
import sys
from contextlib import ExitStack
from typing import Sequence, TextIO

from interview_digest.config import environment_usage, load_config
from interview_digest.dependencies import build_pipeline
from interview_digest.exceptions import (
    ConfigurationError,
    InterviewDigestError,
    UsageError,
)
from interview_digest.infrastructure import StreamSink
from interview_digest.logging import setup_logging

USAGE = "%(prog)s [-o output.md] audio1.m4a [audio2.m4a ...]"


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def utf8_stdout() -> TextIO:
    """Returns stdout set to encode UTF-8 whatever the locale says."""
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(encoding="utf-8")
    return sys.stdout


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=prog,
        usage=USAGE,
        description="Transcribe interview recordings with Gemini and synthesize a summary.",
        add_help=False,
    )
    parser.add_argument(
        "-o",
        dest="output",
        default="",
        help="Path to the output file. If empty, stdout will be used.",
    )
    parser.add_argument("-h", dest="help", action="store_true", help="Help")
    parser.add_argument("audio_files", nargs="*", help="Audio files to transcribe, in order")
    return parser


def run(
    argv: Sequence[str] | None = None,
    *,
    prog: str | None = None,
) -> int:
    """
    Runs the command line and returns the process exit status.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv[1:].
        prog: Program name shown in usage messages.
    """
    setup_logging()
    logger = logging.getLogger("interview_digest")
    parser = build_parser(prog)

    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        logger.error("Invalid arguments", extra={"error": str(e)})
        parser.print_usage(sys.stderr)
        return 1

    if args.help:
        sys.stderr.write(environment_usage() + "\n")
        parser.print_help(sys.stderr)
        return 1

    try:
        config = load_config()
    except ConfigurationError as e:
        logger.error(
            "Failed to process environment variables",
            extra={"field": e.field, "error": str(e)},
        )
        sys.stderr.write(environment_usage())
        return 1

    if not args.audio_files:
        logger.error("At least one audio file required as argument")
        parser.print_usage(sys.stderr)
        return 1

    try:
        pipeline = build_pipeline(config, logger)
    except InterviewDigestError as e:
        logger.error("Failed to initialize pipeline", extra={"error": str(e)})
        return 1

    with ExitStack() as stack:
        if args.output:
            try:
                stream = stack.enter_context(open(args.output, "w", encoding="utf-8"))
            except OSError as e:
                logger.error(
                    "Failed to create output file",
                    extra={"output": args.output, "error": str(e)},
                )
                return 1
            sink = StreamSink(stream, args.output)
        else:
            sink = StreamSink(utf8_stdout(), "<stdout>")

        try:
            pipeline.run(args.audio_files, sink)
        except InterviewDigestError as e:
            logger.error(
                "Pipeline aborted",
                extra={"error": str(e), "error_type": type(e).__name__},
            )
            return 1

    return 0
