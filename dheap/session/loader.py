import re
from pathlib import Path
from typing import Optional, Union

from dheap.logger import logger
from dheap.settings import MAX_ARRAYS, MAX_LINE_LENGTH

_NUMBER = re.compile(r"[+-]?\d+")


class ArrayFileError(ValueError):
    """An array file that cannot be opened or parsed."""

    def __init__(self, message: str, lineno: Optional[int] = None) -> None:
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)
        self.lineno = lineno


def is_number(token: str) -> bool:
    """Whether ``token`` is an optionally signed decimal integer."""
    return _NUMBER.fullmatch(token) is not None


def parse_array(line: str) -> list[int]:
    """Parse one whitespace-separated line of integers."""
    values = []
    for token in line.split():
        if not is_number(token):
            raise ValueError(f"{token!r} is not an integer")
        values.append(int(token))
    return values


def read_arrays(
    path: Union[str, Path],
    max_arrays: int = MAX_ARRAYS,
    max_line_length: int = MAX_LINE_LENGTH
) -> list[list[int]]:
    """
    Read integer arrays from a text file, one array per line.

    Blank lines are skipped. Lines beyond the first ``max_arrays`` arrays
    are ignored.

    Parameters
    ----------
    path : str or Path
        The file to read.
    max_arrays : int
        Maximum number of arrays to read, by default 10.
    max_line_length : int
        Maximum number of characters on a line, by default 30000.

    Returns
    -------
    list[list[int]]
        The arrays in file order.

    Raises
    ------
    ArrayFileError
        If the file cannot be opened or decoded, a line is too long, or a
        token is not an integer.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except OSError as e:
        raise ArrayFileError(f"cannot open {path}: {e.strerror}") from e
    except UnicodeDecodeError as e:
        raise ArrayFileError(f"cannot decode {path}: {e.reason} at byte {e.start}") from e

    arrays = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        if len(arrays) == max_arrays:
            logger.warning(
                f"{path}: only the first {max_arrays} arrays are used, "
                f"ignoring line {lineno} onwards"
            )
            break
        if len(line) > max_line_length:
            raise ArrayFileError(
                f"line longer than {max_line_length} characters", lineno
            )
        try:
            arrays.append(parse_array(line))
        except ValueError as e:
            raise ArrayFileError(str(e), lineno) from e

    logger.info(f"read {len(arrays)} arrays from {path}")
    return arrays
