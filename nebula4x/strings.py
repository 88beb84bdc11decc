"""Small string helpers shared by the exporters and the command line tools."""

__all__ = ["to_lower", "csv_escape"]

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

_CSV_SPECIAL = frozenset(',"\n\r')


def to_lower(s: str) -> str:
    """Lower-case the ASCII letters of ``s``; other characters are kept as they are."""
    return s.translate(_ASCII_LOWER)


def csv_escape(s: str) -> str:
    """Escape ``s`` for use as a single CSV cell.

    A value containing a comma, a double quote, or a line break is wrapped in
    double quotes, with inner quotes doubled. Anything else is returned unchanged.
    """
    if not any(ch in _CSV_SPECIAL for ch in s):
        return s
    return '"' + s.replace('"', '""') + '"'