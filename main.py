"""Punto de entrada de la calculadora básica."""

import logging
import os
import tkinter as tk

from calculator_ui import CalculatorApp
from calculator_view_model import CalculatorViewModel


WINDOW_GEOMETRY = "360x620"
WINDOW_MIN_SIZE = (320, 560)


def _setup_logging():
    level_name = os.getenv("CALC_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if root_logger.handlers:
        return root_logger

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    )
    root_logger.addHandler(handler)

    return root_logger


def main():
    log = _setup_logging()

    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    root.minsize(*WINDOW_MIN_SIZE)
    CalculatorApp(root, view_model=CalculatorViewModel())
    log.info("Calculadora iniciada")
    root.mainloop()


if __name__ == "__main__":
    main()
