"""File-backed line supply for polygon filter parsing."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from osmosis_geojson.core.exceptions import PolyFileNotFoundError, PolyParseError

if TYPE_CHECKING:
    from collections.abc import Iterator


def iter_poly_lines(poly_path: Path | str) -> Iterator[str]:
    """Yield the lines of ``poly_path`` one at a time, without terminators.

    The file is opened lazily on first iteration and closed once the
    generator is exhausted or discarded.

    Raises:
        PolyFileNotFoundError: If the file does not exist.
        PolyParseError: If the file cannot be read or decoded.
    """
    poly_path = Path(poly_path)
    try:
        handle = poly_path.open(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        msg = f"File not found: {poly_path}"
        raise PolyFileNotFoundError(msg) from exc
    except OSError as exc:
        msg = f"Cannot read polygon file: {exc}"
        raise PolyParseError(msg) from exc

    with handle:
        try:
            for line in handle:
                yield line.rstrip("\r\n")
        except UnicodeDecodeError as exc:
            msg = f"Polygon file {poly_path.name} is not valid UTF-8: {exc}"
            raise PolyParseError(msg) from exc
