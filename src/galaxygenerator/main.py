"""
Application Initialization
==========================
Builds the Model, the Controller and the View and starts the Qt event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Parses the command line and sets up logging.
2. Instantiates the data model (GalaxyState) and the random generator.
3. Passes them into the Main Window.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import numpy as np

from galaxygenerator.application import create_app
from galaxygenerator.logging_config import setup_logging
from galaxygenerator.model.state import GalaxyState
from galaxygenerator.view.main_window import MainWindow


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="galaxygenerator",
        description="Interactive procedural spiral galaxy generator.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible galaxies.")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level.")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Data Model
    state = GalaxyState()
    rng = np.random.default_rng(args.seed)

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(state, rng=rng)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
