"""Точка входа: без аргументов открывает окно, с двумя путями конвертирует без UI."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from grayconv.models.errors import ConversionError
from grayconv.services.converter_service import convert_to_grayscale


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="grayconv", description="Convert a PNG/JPEG image to grayscale")
    parser.add_argument("input", nargs="?", help="Input image path (.png, .jpg, .jpeg)")
    parser.add_argument("output", nargs="?", help="Output image path (.png, .jpg, .jpeg)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if (args.input is None) != (args.output is None):
        parser.error("both INPUT and OUTPUT are required for headless conversion")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Запускает конвертацию из командной строки или главное окно приложения."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.input is None:
        from grayconv.app import ConverterApp

        app = ConverterApp()
        app.mainloop()
        return 0

    try:
        convert_to_grayscale(args.input, args.output)
    except ConversionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print("Grayscale image saved to", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
