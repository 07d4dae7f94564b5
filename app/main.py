"""Launch the TPS Tester window."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from controllers.number_controller import NumberController
from GUI.tester_window import TesterWindow


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv if argv is None else argv)
    window = TesterWindow(NumberController())
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
