# SPDX-License-Identifier: MIT

from dayplan.cleanup import register_cleanup
from dayplan.initialize import initialize
from dayplan.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
