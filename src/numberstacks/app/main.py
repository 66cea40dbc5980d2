"""
Run with: python -m numberstacks.app.main
"""
from __future__ import annotations

import sys

from numberstacks.app.application import create_app
from numberstacks.app.state import Store
from numberstacks.app.ui.main_window import MainWindow
from numberstacks.config import DEFAULT_NUMBER


def main(number: int = DEFAULT_NUMBER) -> int:
    """Main entry point for the application."""
    app = create_app()
    win = MainWindow(Store(number))
    win.show()
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
