"""
Main entry point for the Hector text editor.
"""
import argparse
import sys

from hector import logger
from hector.editor import Editor
from hector.errors import TerminalInitError, TerminalIOError
from hector.ui.terminal import Terminal

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="hector", description="A minimal terminal text editor")
    parser.add_argument("file", nargs="?", help="The path of the file to open")
    args = parser.parse_args(argv)

    try:
        with Terminal() as terminal:
            Editor(terminal, args.file).run()
    except (TerminalInitError, TerminalIOError) as e:
        # The terminal has been restored by now, so the message is readable
        logger.log(f"fatal: {e}")
        print(f"hector: {e}", file=sys.stderr)
        return 1
    return 0

def run():
    """Console script entry point."""
    sys.exit(main())

if __name__ == "__main__":
    run()
