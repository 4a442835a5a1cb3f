"""Punto de entrada de la calculadora."""

import logging
import tkinter as tk

from calculator_ui import CalculatorApp
from entry_engine import EntryEngine
from logging_config import get_logger, setup_logging
from number_provider import PythonNumberProvider


USE_ARBITRARY_PRECISION = False
AP_DIGITS = 30
LOG_LEVEL = logging.INFO
LOG_FILE = None
WINDOW_GEOMETRY = "340x480"


def build_engine() -> EntryEngine:
    if USE_ARBITRARY_PRECISION:
        from arbitrary_precision_provider import MPMathNumberProvider

        provider = MPMathNumberProvider(digits=AP_DIGITS)
    else:
        provider = PythonNumberProvider()
    get_logger(__name__).info("Proveedor numérico: %s", provider.name)
    return EntryEngine(provider)


def main():
    setup_logging(LOG_LEVEL, LOG_FILE)
    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    CalculatorApp(root, engine=build_engine())
    root.mainloop()


if __name__ == "__main__":
    main()
