# SPDX-License-Identifier: MIT

from fieldtask.cleanup import register_cleanup
from fieldtask.initialize import initialize
from fieldtask.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
