"""
Application Initialization
==========================
This module parses the command line, sets up logging and starts the Qt Event
Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging before any window exists.
2. Creates the QApplication.
3. Instantiates the Main Window, which wires the Shape Controller to the
   viewport and the control panel.
"""
import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from roulettecurves.application import create_app
from roulettecurves.config import VIEW_SETTINGS
from roulettecurves.logging_config import setup_logging
from roulettecurves.model import presets
from roulettecurves.view.main_window import MainWindow

PRESET_CHOICES = {str(i): key for i, key in enumerate(presets.list_keys(), start=1)}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="roulettecurves",
        description="Animated hypotrochoids and epitrochoids in 3D.",
    )
    parser.add_argument(
        "--preset", choices=sorted(PRESET_CHOICES), default="1",
        help="preset applied at start-up (default: 1)",
    )
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    parser.add_argument(
        "--real-time", action="store_true",
        help="advance the animation by the real elapsed time instead of a fixed step per frame",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the Main Window with the chosen preset
    view_settings = VIEW_SETTINGS
    if args.real_time:
        view_settings = dataclasses.replace(view_settings, seconds_per_frame=None)
    window = MainWindow(initial_preset=PRESET_CHOICES[args.preset], view_settings=view_settings)
    window.show()

    # 4. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
