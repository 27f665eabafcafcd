"""
Interview Digest.

Entry point for the interview transcription and synthesis command.
"""

import sys

from ddtrace import patch_all

from interview_digest.cli import run

patch_all()


def main():
    """Runs the command line and exits with its status."""
    sys.exit(run())


if __name__ == "__main__":
    main()
