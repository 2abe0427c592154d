"""Delimited tabular text scanner.

Handles the comma-separated dialect produced by spreadsheet exports:
double-quoted fields, ``""`` as an escaped quote inside a quoted field, and
commas or line breaks embedded in quoted fields. CR characters outside quotes
are discarded, which folds CRLF and lone CR endings into LF.
"""

__all__ = ["parse_delimited", "QUOTE", "DELIMITER"]

QUOTE = '"'
DELIMITER = ","
LINE_FEED = "\n"
CARRIAGE_RETURN = "\r"


def parse_delimited(text: str) -> list[list[str]]:
    """Split delimited text into rows of fields in one left-to-right pass.

    Parameters
    ----------
    text : str
        Complete table text.

    Returns
    -------
    list[list[str]]
        Rows in input order. The trailing in-progress field and row are always
        flushed, so empty input yields ``[[""]]`` and text ending in a line
        feed yields a final ``[""]`` row; callers drop blank rows.

    Examples
    --------
    >>> parse_delimited('"x ""y"" z",w')
    [['x "y" z', 'w']]
    """
    rows: list[list[str]] = []
    row: list[str] = []
    field: list[str] = []
    in_quotes = False

    i = 0
    length = len(text)
    while i < length:
        ch = text[i]

        if in_quotes:
            if ch == QUOTE:
                if i + 1 < length and text[i + 1] == QUOTE:
                    field.append(QUOTE)
                    i += 2
                    continue
                in_quotes = False
            else:
                field.append(ch)
            i += 1
            continue

        if ch == QUOTE:
            in_quotes = True
        elif ch == DELIMITER:
            row.append("".join(field))
            field = []
        elif ch == LINE_FEED:
            row.append("".join(field))
            rows.append(row)
            field = []
            row = []
        elif ch != CARRIAGE_RETURN:
            field.append(ch)
        i += 1

    row.append("".join(field))
    rows.append(row)
    return rows
