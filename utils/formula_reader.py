# utils/formula_reader.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Line-oriented reader for formula files and streams

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, TextIO
from utils.logger import get_logger


COMMENT_PREFIX = "#"


class FormulaFileError(Exception):
    """Exception raised when a formula file cannot be opened or read."""

    pass


@dataclass(frozen=True)
class FormulaLine:
    """One formula read from an input source.

    Attributes:
        line_number: 1-based line number in the source
        text: Formula text with surrounding whitespace removed
    """

    line_number: int
    text: str


def read_formula_stream(stream: TextIO, source: str = "<stdin>") -> Iterator[FormulaLine]:
    """Read formulas from an open text stream, one per line.

    Blank lines and lines starting with '#' are skipped. The text is not
    parsed here; syntax errors are reported per line by the parser.

    Args:
        stream: Open text stream such as sys.stdin
        source: Name of the input used in error messages

    Yields:
        FormulaLine: Formulas in stream order

    Raises:
        FormulaFileError: If the stream content cannot be decoded
    """
    logger = get_logger()

    try:
        for line_number, raw_line in enumerate(stream, start=1):
            text = raw_line.strip()
            if not text or text.startswith(COMMENT_PREFIX):
                continue

            logger.debug(f"Read formula from line {line_number}: {text}")
            yield FormulaLine(line_number, text)

    except UnicodeDecodeError as e:
        raise FormulaFileError(f"{source} is not valid UTF-8: {e}") from e


def read_formulas(filepath: str) -> Iterator[FormulaLine]:
    """Read formulas from a text file, one per line.

    Expected file format:
        # comment lines are ignored
        ((a^b)->a)
        (p|(-p))

    Args:
        filepath: Path to the formula file

    Yields:
        FormulaLine: Formulas in file order

    Raises:
        FormulaFileError: If the file does not exist or cannot be read
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise FormulaFileError(f"Formula file not found: {filepath}")

    logger.debug(f"Reading formula file: {filepath}")

    try:
        with open(path, "r", encoding="utf-8") as file:
            yield from read_formula_stream(file, source=f"Formula file {filepath}")

    except OSError as e:
        raise FormulaFileError(f"Cannot read formula file {filepath}: {e}") from e
