"""
Utility functions for formatting text-based reports and tables.

Provides consistent table formatting for dashboard reports.
"""

from typing import Any, List


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        text = str(value)
        if len(text) > self.width:
            text = text[: max(self.width - 1, 0)] + "…"
        return f"{text:{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column] = None, total_width: int = 80):
        """
        Args:
            columns: Column definitions for the current table (may be swapped later)
            total_width: Total report width for separators
        """
        self.columns = columns or []
        self.total_width = total_width
        self.lines: List[str] = []

    def set_columns(self, columns: List[Column]) -> "TableFormatter":
        """
        Switch the active column layout.

        Dashboard reports contain several tables with different shapes, so the
        layout can change between sections of the same report.

        Returns:
            Self for method chaining
        """
        self.columns = columns
        return self

    def add_section_header(self, title: str) -> "TableFormatter":
        """
        Add section header with top/bottom separator lines.

        Returns:
            Self for method chaining
        """
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        header_parts = [col.format_header() for col in self.columns]
        self.lines.append(" ".join(header_parts).rstrip())
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Args:
            values: List of values (one per column)

        Returns:
            Self for method chaining

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        row_parts = [col.format_value(val) for col, val in zip(self.columns, values)]
        self.lines.append(" ".join(row_parts).rstrip())
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def render(self) -> str:
        """
        Render accumulated lines to string.

        Returns:
            Formatted report string
        """
        return "\n".join(self.lines)


def format_bar(percent: float, width: int = 20, fill: str = "#", empty: str = ".") -> str:
    """
    Format a percentage as a fixed-width text bar.

    Args:
        percent: Value between 0 and 100 (values outside are clamped)
        width: Number of characters in the bar
        fill: Character for the filled portion
        empty: Character for the unfilled portion

    Returns:
        Bar string, e.g. "#####..............." for 25%
    """
    clamped = min(max(percent, 0), 100)
    filled = int(width * clamped / 100)
    return fill * filled + empty * (width - filled)


def pluralize(count: int, noun: str) -> str:
    """Return "1 job" / "3 jobs" style phrases."""
    return f"{count} {noun}{'' if count == 1 else 's'}"
