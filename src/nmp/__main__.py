"""Run the interactive processor: python -m nmp [-v|--verbose]"""

import sys

from nmp.app import Application


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    verbose = "-v" in argv or "--verbose" in argv
    Application(verbose=verbose).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
