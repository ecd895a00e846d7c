from pathlib import Path
from typing import Iterator, Union

from linfit.ml.errors import SourceUnavailableError


def _open_source(path: Union[str, Path]):
    try:
        return open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        raise SourceUnavailableError(path, e.strerror or str(e)) from e


def read_lines(path: Union[str, Path]) -> Iterator[str]:
    """
    Return a lazy iterator over the lines of a text source.

    The source is opened once up front so that a missing or unreadable file is
    reported here, as a SourceUnavailableError, rather than halfway through
    iteration. That check handle is closed straight away; the iterator opens
    its own handle on first use, so an iterator that is never advanced holds
    no file open. Line terminators are stripped. Undecodable bytes are
    replaced so that a bad line stays a bad line instead of aborting the read.

    Raises:
        SourceUnavailableError: If the source cannot be opened.
    """
    _open_source(path).close()
    return _iter_lines(path)


def _iter_lines(path: Union[str, Path]) -> Iterator[str]:
    with _open_source(path) as handle:
        for line in handle:
            yield line.rstrip("\r\n")
