"""
Main entry point for the TAA command-line assistant.
"""

import logging
import sys
from typing import List, Optional

from .commands import parse_command
from .config import TaaConfig, load_config
from .core.exceptions import PersistenceError, TaaException
from .core.interfaces import Storage
from .persistence import JsonFileStorage
from .ui import ConsoleUi

logger = logging.getLogger(__name__)


class TaaApplication:
    """Owns the domain model and runs commands against it, one line at a time."""

    def __init__(self, config: Optional[TaaConfig] = None, ui: Optional[ConsoleUi] = None,
                 storage: Optional[Storage] = None):
        self._config = config or TaaConfig()
        self._ui = ui or ConsoleUi()
        self._storage = storage or JsonFileStorage(self._config.data_file, self._config.name_policy)
        self._model = self._storage.load()
        logger.info(
            "Loaded %d modules and %d classes", self._model.modules.size, self._model.classes.size
        )

    @property
    def model(self):
        return self._model

    def run_command(self, line: str) -> bool:
        """Run one user line. Returns True if the line asked to exit."""
        if not line.strip():
            return False

        try:
            command = parse_command(line)
            command.validate()
            command.execute(self._model, self._ui, self._storage)
            return command.IS_EXIT
        except PersistenceError as e:
            logger.warning("Save failed, in-memory data is ahead of storage: %s", e.message)
            self._ui.print_error(e.message)
        except TaaException as e:
            logger.debug("Command failed (%s): %s", e.error_code, e.message)
            self._ui.print_error(e.message)
        return False

    def run(self) -> None:
        """Read and run commands until ``exit`` or end of input."""
        self._ui.print_welcome()
        while True:
            line = self._ui.read_command()
            if line is None:
                break
            if self.run_command(line):
                break


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TAA - Teaching Assistant Assistant")
    parser.add_argument("--config", type=str, help="Configuration file path")
    parser.add_argument("--data-file", type=str, help="JSON file the data is stored in")
    parser.add_argument("--log-level", type=str, choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level")

    args = parser.parse_args(argv)

    ui = ConsoleUi()
    try:
        config = load_config(args.config, {"data_file": args.data_file, "log_level": args.log_level})
    except TaaException as e:
        ui.print_error(e.message)
        return 2

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        application = TaaApplication(config, ui)
    except TaaException as e:
        ui.print_error(e.message)
        return 1

    try:
        application.run()
    except KeyboardInterrupt:
        ui.print_message("Interrupted. Your data has been saved.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
