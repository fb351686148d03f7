from __future__ import annotations

"""
Process Entry Point.

The tool is normally started from a compositor key binding, where stderr
goes nowhere. Crashes are therefore written both to stderr and, as a
last resort, to a crash file in the user data directory before the
process exits with the failure code.
"""

import logging
import os
import sys
import traceback
from types import TracebackType
from typing import List, Optional, Type

# Allow 'python src/fuzzel_pass/main.py' without installing the package
SRC_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

CRASH_FILE_NAME = "crash.log"


def report_crash(
        exc_type: Type[BaseException],
        exc: BaseException,
        tb: Optional[TracebackType],
) -> Optional[str]:
    """
    Print the traceback on stderr and save it to the crash file.

    Returns:
        Optional[str]: Path of the crash file, or None if it could not be written.
    """
    trace = "".join(traceback.format_exception(exc_type, exc, tb))
    logging.getLogger("fuzzel_pass.crash").critical(f"Unhandled {exc_type.__name__}: {exc}")
    sys.stderr.write(f"fuzzel-pass: unexpected error\n{trace}")

    from fuzzel_pass.infra.fs import get_user_data_dir

    crash_path = os.path.join(get_user_data_dir(), CRASH_FILE_NAME)
    try:
        with open(crash_path, "w", encoding="utf-8") as f:
            f.write(trace)
    except OSError:
        return None
    sys.stderr.write(f"fuzzel-pass: traceback saved to {crash_path}\n")
    return crash_path


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line application.

    Returns:
        int: Process exit code.
    """
    sys.excepthook = report_crash
    try:
        from fuzzel_pass.interface.cli.app import main as cli_main
        return cli_main(argv)
    except Exception as e:
        report_crash(type(e), e, e.__traceback__)
        return 1


if __name__ == "__main__":
    sys.exit(main())
