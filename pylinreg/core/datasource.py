"""
Delimited-table DataSource for PyLinReg.

DataSource is the "I have a table" abstraction. It reads a comma-delimited
text source once, keeps the header and the raw field text, and hands out
numeric columns on request. It doesn't know which two columns a regression
will pick.

Reading happens in two stages. read_table_text() decodes the source as
UTF-8 and drops blank lines while remembering the file line of every kept
line; its header is available before any data row is tokenized.
DataSource.from_text() then splits the data rows into fields.

Usage:
    from pylinreg.core.datasource import DataSource, read_table_text

    ds = DataSource.from_file("data.csv")
    ds = DataSource.from_file(Path("data.csv"))
    with open("data.csv") as fh:
        ds = DataSource.from_file(fh)

    text = read_table_text("data.csv")
    text.header            # ('a', 'b', 'c'), data rows not yet read
    ds = DataSource.from_text(text)

    ds.column_names        # ('a', 'b', 'c')
    x, y = ds.read_pairs(0, 2)
"""

from __future__ import annotations

import csv
import io
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TextIO, Union

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from pylinreg.core.exceptions import ParseError, SourceReadError, ValidationError

# Field delimiter; no quoting or escaping is recognised.
DELIMITER = ','

ENCODING = 'utf-8-sig'

TableSource = Union[str, os.PathLike, TextIO]

_LINE_RE = re.compile(r'line (\d+)')
_NEWLINE_RE = re.compile(r'\r\n|\r|\n')


@dataclass(frozen=True)
class TableText:
    """
    Decoded table lines, blank lines removed.

    line_numbers[i] is the 1-based line of lines[i] in the original source,
    so errors keep pointing at the file even after blank lines are dropped.
    """
    lines: tuple[str, ...]
    line_numbers: tuple[int, ...]
    source: str
    source_path: str | None = None

    @property
    def header(self) -> tuple[str, ...]:
        """Header fields. Tokenizes the first line only."""
        frame = _read_frame(self.lines[:1], self.line_numbers[:1])
        return tuple(_field_text(v) or '' for v in frame.to_numpy(dtype=object)[0])


def read_table_text(source: TableSource) -> TableText:
    """
    Read and decode a table source without tokenizing it.

    Args:
        source: Filesystem path (str or PathLike) or an open handle.
            Handles are read but not closed.

    Raises:
        ValidationError: Path does not exist, source type unsupported,
            or the table has no header row
        SourceReadError: Source exists but cannot be opened or read
        ParseError: Bytes are not valid UTF-8
    """
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        if not path.exists():
            raise ValidationError(f"source: path does not exist: {str(path)!r}")
        try:
            raw = path.read_bytes()
        except OSError as e:
            raise SourceReadError(
                f"source: cannot read {str(path)!r}: {e}", path=str(path)
            ) from e
        return _split_lines(_decode(raw), source='file', source_path=str(path))

    if hasattr(source, 'read'):
        name = getattr(source, 'name', None)
        source_path = name if isinstance(name, str) else None
        try:
            raw = source.read()
        except OSError as e:
            raise SourceReadError(
                f"source: cannot read handle: {e}", path=source_path
            ) from e
        except UnicodeDecodeError as e:
            raise ParseError(f"source: handle text is not decodable: {e}") from e
        text = _decode(raw) if isinstance(raw, bytes) else raw
        return _split_lines(text, source='handle', source_path=source_path)

    raise ValidationError(
        f"source: expected a path or an open text handle, got {type(source).__name__}"
    )


@dataclass(frozen=True)
class DataSource:
    """
    Raw delimited table: header plus unparsed data fields.

    Construct via DataSource.from_file() or DataSource.from_text(), not
    directly.
    """
    _columns: tuple[str, ...]
    _fields: NDArray[np.object_]
    _line_numbers: tuple[int, ...]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Properties ===

    @property
    def column_names(self) -> tuple[str, ...]:
        """Header fields, in file order."""
        return self._columns

    @property
    def n_columns(self) -> int:
        return len(self._columns)

    @property
    def n_observations(self) -> int:
        """Number of data rows (header and blank lines excluded)."""
        return self._fields.shape[0]

    @property
    def line_numbers(self) -> tuple[int, ...]:
        """Source line of each data row."""
        return self._line_numbers

    @property
    def metadata(self) -> dict[str, Any]:
        return self._metadata.copy()

    # === Column access ===

    def column(self, index: int) -> tuple[str | None, ...]:
        """
        Raw text of one column; None marks a field the reader left empty.

        Raises:
            IndexError: If index is outside the header
        """
        if not 0 <= index < self.n_columns:
            raise IndexError(
                f"DataSource has no column {index}. Width: {self.n_columns}"
            )
        return tuple(_field_text(v) for v in self._fields[:, index])

    def read_pairs(
        self, x_index: int, y_index: int
    ) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        """
        Parse two columns row by row into float64 arrays.

        Rows are visited in file order and the x field of a row is parsed
        before its y field, so the error names the first bad field.

        Args:
            x_index: Column holding x values
            y_index: Column holding y values

        Returns:
            (x, y) arrays of length n_observations

        Raises:
            ParseError: On the first field that is missing or not a number
        """
        n = self.n_observations
        x = np.empty(n, dtype=np.float64)
        y = np.empty(n, dtype=np.float64)
        for row in range(n):
            x[row] = self._parse_field(row, x_index)
            y[row] = self._parse_field(row, y_index)
        return x, y

    def _parse_field(self, row: int, index: int) -> float:
        text = _field_text(self._fields[row, index])
        column = self._columns[index]
        line_number = self._line_numbers[row]
        if text is None:
            raise ParseError(
                f"line {line_number}: missing field for column {column!r}",
                line_number=line_number,
                column=column,
                value=None,
            )
        try:
            return float(text)
        except ValueError as e:
            raise ParseError(
                f"line {line_number}: column {column!r}: cannot parse {text!r} as a number",
                line_number=line_number,
                column=column,
                value=text,
            ) from e

    # === Factory Methods ===

    @classmethod
    def from_file(cls, source: TableSource) -> DataSource:
        """
        Read a comma-delimited table whose first non-blank line is the header.

        Args:
            source: Filesystem path (str or PathLike) or an open text handle.
                Handles are read but not closed. Files are decoded as UTF-8.

        Raises:
            ValidationError: Path does not exist, source type unsupported,
                or table has no header row
            SourceReadError: Source exists but cannot be opened or read
            ParseError: Invalid UTF-8, or a data row wider than the header
        """
        return cls.from_text(read_table_text(source))

    @classmethod
    def from_text(cls, text: TableText) -> DataSource:
        """
        Tokenize already decoded table lines.

        Raises:
            ParseError: A data row is wider than the header
        """
        table = _read_frame(text.lines, text.line_numbers)
        values = table.to_numpy(dtype=object)
        columns = tuple(_field_text(v) or '' for v in values[0])
        fields = values[1:]

        metadata: dict[str, Any] = {
            'n_observations': fields.shape[0],
            'source': text.source,
            'columns': list(columns),
        }
        if text.source_path:
            metadata['source_path'] = text.source_path

        return cls(
            _columns=columns,
            _fields=fields,
            _line_numbers=text.line_numbers[1:],
            _metadata=metadata,
        )


def _decode(raw: bytes) -> str:
    try:
        return raw.decode(ENCODING)
    except UnicodeDecodeError as e:
        line_number = raw[:e.start].count(b'\n') + 1
        raise ParseError(
            f"line {line_number}: invalid UTF-8 byte {raw[e.start:e.start + 1]!r}",
            line_number=line_number,
        ) from e


def _split_lines(text: str, *, source: str, source_path: str | None) -> TableText:
    kept = [
        (number, line)
        for number, line in enumerate(_NEWLINE_RE.split(text), start=1)
        if line.strip()
    ]
    if not kept:
        raise ValidationError("source: table is empty, expected a header row")
    return TableText(
        lines=tuple(line for _, line in kept),
        line_numbers=tuple(number for number, _ in kept),
        source=source,
        source_path=source_path,
    )


def _read_frame(lines: tuple[str, ...], line_numbers: tuple[int, ...]) -> pd.DataFrame:
    """Split lines into text fields, header included."""
    try:
        return pd.read_csv(
            io.StringIO('\n'.join(lines) + '\n'),
            sep=DELIMITER,
            header=None,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            quoting=csv.QUOTE_NONE,
            skip_blank_lines=False,
        )
    except pd.errors.EmptyDataError as e:
        raise ValidationError("source: table is empty, expected a header row") from e
    except pd.errors.ParserError as e:
        match = _LINE_RE.search(str(e))
        line_number = None
        if match and 1 <= int(match.group(1)) <= len(line_numbers):
            line_number = line_numbers[int(match.group(1)) - 1]
        raise ParseError(
            f"line {line_number}: malformed row: {e}", line_number=line_number
        ) from e


def _field_text(value: Any) -> str | None:
    """Field text, or None for padding pandas inserts into short rows."""
    return value if isinstance(value, str) else None
