from __future__ import annotations

import logging

from fourgrid.config import LOG_LEVEL
from fourgrid.ui.menu import run_menu


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    run_menu()


if __name__ == "__main__":
    main()
