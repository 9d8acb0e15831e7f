"""Utility helpers for opening scan inputs."""

from __future__ import annotations

import codecs
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, TextIO

from guidscan.config import TextEncoding
from guidscan.errors import AccessDenied, PathNotFound, ReadFailed

FALLBACK_CODEC = "utf-8"

FIXED_CODECS = {
    TextEncoding.ASCII: "ascii",
    TextEncoding.UNICODE: "utf-16-le",
    TextEncoding.UTF32: "utf-32-le",
    TextEncoding.UTF7: "utf-7",
    TextEncoding.UTF8: "utf-8",
}

# Longest marks first: the UTF-32 LE mark begins with the UTF-16 LE one.
_BOMS = (
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def validate_input_path(path: Path) -> Path:
    """Ensure path names an existing, readable regular file."""
    if not path.is_file():
        raise PathNotFound(path)
    if not os.access(path, os.R_OK):
        raise AccessDenied(path)
    return path


def detect_bom_encoding(head: bytes) -> Optional[str]:
    """Return the codec announced by a byte-order mark, if any."""
    for bom, codec in _BOMS:
        if head.startswith(bom):
            return codec
    return None


def resolve_codec(path: Path, encoding: TextEncoding) -> str:
    """Pick the Python codec used to decode path."""
    encoding = TextEncoding(encoding)
    if encoding is not TextEncoding.AUTO_DETECT:
        return FIXED_CODECS[encoding]
    with path.open("rb") as handle:
        head = handle.read(4)
    return detect_bom_encoding(head) or FALLBACK_CODEC


@contextmanager
def open_text(path: Path, encoding: TextEncoding = TextEncoding.AUTO_DETECT) -> Iterator[TextIO]:
    """Open path for decoded reading; the stream is closed on every exit path."""
    validate_input_path(path)
    try:
        codec = resolve_codec(path, encoding)
        handle = path.open("r", encoding=codec, errors="replace", newline="")
    except PermissionError as exc:
        raise AccessDenied(path) from exc
    except (FileNotFoundError, IsADirectoryError) as exc:
        raise PathNotFound(path) from exc
    except OSError as exc:
        raise ReadFailed(path) from exc
    try:
        yield handle
    except PermissionError as exc:
        raise AccessDenied(path) from exc
    except OSError as exc:
        raise ReadFailed(path) from exc
    finally:
        handle.close()
