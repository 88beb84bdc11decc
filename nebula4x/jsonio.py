"""A small JSON reader and writer with helpful error messages.

Values map onto plain Python types: ``None``, ``bool``, ``float`` (numbers are
always read as floats), ``str``, ``list`` and ``dict``.
"""

import math
from collections.abc import Mapping

__all__ = ["JsonParseError", "parse", "stringify"]

_BOM = "\ufeff"
_WS = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_HEX = {**{c: int(c, 16) for c in "0123456789abcdef"}, **{c: int(c, 16) for c in "ABCDEF"}}

_CONTEXT_BEFORE = 80
_CONTEXT_AFTER = 80
_MAX_CONTEXT_LINE = _CONTEXT_BEFORE + _CONTEXT_AFTER

_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class JsonParseError(ValueError):
    """Raised when a document is not valid JSON."""

    def __init__(self, message, position=None, line=None, column=None):
        super().__init__(message)
        self.position = position
        self.line = line
        self.column = column


class _Parser:
    def __init__(self, text: str) -> None:
        self.s = text
        self.i = 0

    def peek(self) -> str:
        return self.s[self.i] if self.i < len(self.s) else ""

    def get(self) -> str:
        if self.i < len(self.s):
            ch = self.s[self.i]
            self.i += 1
            return ch
        return ""

    def skip_ws(self) -> None:
        s = self.s
        while self.i < len(s) and s[self.i] in _WS:
            self.i += 1

    def fail(self, msg: str):
        s = self.s
        pos = min(self.i, len(s))

        line_start = scan = 0
        if s.startswith(_BOM):
            line_start = scan = 1
        line = col = 1
        if scan > pos:
            scan = line_start = pos

        while scan < pos:
            ch = s[scan]
            if ch == "\n":
                line += 1
                col = 1
                scan += 1
                line_start = scan
            elif ch == "\r":
                line += 1
                col = 1
                scan += 2 if s[scan + 1 : scan + 2] == "\n" else 1
                line_start = scan
            else:
                col += 1
                scan += 1

        line_end = line_start
        while line_end < len(s) and s[line_end] not in "\r\n":
            line_end += 1

        line_len = line_end - line_start
        in_line = pos - line_start if pos >= line_start else 0
        snippet_start, snippet_end = line_start, line_end
        prefix = suffix = False
        if line_len > _MAX_CONTEXT_LINE:
            snippet_start = pos - _CONTEXT_BEFORE if in_line > _CONTEXT_BEFORE else line_start
            snippet_end = min(line_end, pos + _CONTEXT_AFTER)
            prefix = snippet_start > line_start
            suffix = snippet_end < line_end

        snippet = ("..." if prefix else "") + s[snippet_start:snippet_end] + ("..." if suffix else "")
        caret = (3 if prefix else 0) + (pos - snippet_start if pos >= snippet_start else 0)
        caret = min(caret, len(snippet))

        message = f"JSON parse error at {self.i} (line {line}, col {col}): {msg}"
        if snippet:
            message += f"\n{snippet}\n{' ' * caret}^"
        raise JsonParseError(message, position=self.i, line=line, column=col)

    def consume(self, c: str) -> bool:
        self.skip_ws()
        if self.peek() == c:
            self.i += 1
            return True
        return False

    def expect(self, c: str) -> None:
        self.skip_ws()
        if self.get() != c:
            self.fail(f"expected '{c}'")

    def parse_hex4(self) -> int:
        if self.i + 4 > len(self.s):
            self.fail("bad unicode escape")
        code = 0
        for _ in range(4):
            digit = _HEX.get(self.get())
            if digit is None:
                self.fail("bad unicode hex")
            code = (code << 4) | digit
        return code

    def parse_value(self):
        self.skip_ws()
        c = self.peek()
        if c == "n":
            return self.parse_literal("null", None)
        if c == "t":
            return self.parse_literal("true", True)
        if c == "f":
            return self.parse_literal("false", False)
        if c == '"':
            return self.parse_string()
        if c == "[":
            return self.parse_array()
        if c == "{":
            return self.parse_object()
        if c == "-" or c in _DIGITS and c:
            return self.parse_number()
        self.fail("unexpected character")

    def parse_literal(self, literal: str, value):
        for expected in literal:
            if self.get() != expected:
                self.fail("invalid literal")
        return value

    def _skip_digits(self) -> None:
        while self.peek() and self.peek() in _DIGITS:
            self.i += 1

    def _at_digit(self) -> bool:
        c = self.peek()
        return bool(c) and c in _DIGITS

    def parse_number(self) -> float:
        self.skip_ws()
        start = self.i
        if self.peek() == "-":
            self.i += 1
        if not self._at_digit():
            self.fail("invalid number")
        if self.peek() == "0":
            self.i += 1
        else:
            self._skip_digits()
        mantissa_end = self.i
        if self.peek() == ".":
            self.i += 1
            if not self._at_digit():
                self.fail("invalid number fraction")
            self._skip_digits()
            mantissa_end = self.i
        if self.peek() in ("e", "E") and self.peek():
            self.i += 1
            if self.peek() in ("+", "-") and self.peek():
                self.i += 1
            if not self._at_digit():
                self.fail("invalid exponent")
            self._skip_digits()
        text = self.s[start : self.i]
        value = float(text)
        underflow = value == 0.0 and any(d in "123456789" for d in self.s[start:mantissa_end])
        if math.isinf(value) or underflow:
            self.fail("failed to parse number")
        return value

    def parse_string(self) -> str:
        self.expect('"')
        out = []
        s = self.s
        while True:
            if self.i >= len(s):
                self.fail("unterminated string")
            c = self.get()
            if c == '"':
                break
            if c != "\\":
                out.append(c)
                continue
            if self.i >= len(s):
                self.fail("bad escape")
            e = self.get()
            simple = _SIMPLE_ESCAPES.get(e)
            if simple is not None:
                out.append(simple)
            elif e == "u":
                out.append(self._parse_unicode_escape())
            else:
                self.fail("unknown escape")
        return "".join(out)

    def _parse_unicode_escape(self) -> str:
        hi = self.parse_hex4()
        if 0xD800 <= hi <= 0xDBFF:
            if self.i + 2 > len(self.s):
                self.fail("bad unicode surrogate pair")
            if self.get() != "\\" or self.get() != "u":
                self.fail("expected low surrogate")
            lo = self.parse_hex4()
            if not 0xDC00 <= lo <= 0xDFFF:
                self.fail("invalid low surrogate")
            return chr(0x10000 + (((hi - 0xD800) << 10) | (lo - 0xDC00)))
        if 0xDC00 <= hi <= 0xDFFF:
            self.fail("unexpected low surrogate")
        return chr(hi)

    def parse_array(self) -> list:
        self.expect("[")
        arr = []
        self.skip_ws()
        if self.consume("]"):
            return arr
        while True:
            arr.append(self.parse_value())
            self.skip_ws()
            if self.consume("]"):
                return arr
            self.expect(",")

    def parse_object(self) -> dict:
        self.expect("{")
        obj = {}
        self.skip_ws()
        if self.consume("}"):
            return obj
        while True:
            self.skip_ws()
            if self.peek() != '"':
                self.fail("expected string key")
            key = self.parse_string()
            self.expect(":")
            obj[key] = self.parse_value()
            self.skip_ws()
            if self.consume("}"):
                return obj
            self.expect(",")


def parse(text):
    """Parse a JSON document given as ``str`` or UTF-8 ``bytes``.

    A leading byte order mark is ignored. Raises :class:`JsonParseError`.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise JsonParseError(f"JSON parse error: invalid UTF-8 ({exc})") from exc
    parser = _Parser(text)
    if text.startswith(_BOM):
        parser.i = 1
    value = parser.parse_value()
    parser.skip_ws()
    if parser.i != len(text):
        raise JsonParseError("Trailing characters after JSON", position=parser.i)
    return value


def _escape_string(value: str) -> str:
    out = ['"']
    for ch in value:
        if ch == '"':
            out.append('\\"')
        elif ch == "\\":
            out.append("\\\\")
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\r":
            out.append("\\r")
        elif ch == "\t":
            out.append("\\t")
        elif ord(ch) < 0x20:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def _format_number(value) -> str:
    if isinstance(value, int):
        return str(value)
    if math.isfinite(value) and abs(value - round(value)) < 1e-9:
        return str(int(round(value)))
    return format(value, "g")


def _write(value, out: list, indent: int, depth: int) -> None:
    def pad(d: int) -> None:
        out.append(" " * (d * indent))

    if value is None:
        out.append("null")
    elif isinstance(value, bool):
        out.append("true" if value else "false")
    elif isinstance(value, (int, float)):
        out.append(_format_number(value))
    elif isinstance(value, str):
        out.append(_escape_string(value))
    elif isinstance(value, (list, tuple)):
        out.append("[")
        if value:
            if indent > 0:
                out.append("\n")
            for n, item in enumerate(value, 1):
                if indent > 0:
                    pad(depth + 1)
                _write(item, out, indent, depth + 1)
                if n < len(value):
                    out.append(",")
                if indent > 0:
                    out.append("\n")
            if indent > 0:
                pad(depth)
        out.append("]")
    elif isinstance(value, Mapping):
        out.append("{")
        if value:
            if indent > 0:
                out.append("\n")
            keys = sorted(value)
            for n, key in enumerate(keys, 1):
                if not isinstance(key, str):
                    raise TypeError(f"JSON object keys must be strings, not {type(key).__name__}")
                if indent > 0:
                    pad(depth + 1)
                out.append(_escape_string(key))
                out.append(":")
                if indent > 0:
                    out.append(" ")
                _write(value[key], out, indent, depth + 1)
                if n < len(keys):
                    out.append(",")
                if indent > 0:
                    out.append("\n")
            if indent > 0:
                pad(depth)
        out.append("}")
    else:
        raise TypeError(f"cannot convert {type(value).__name__} to JSON")


def stringify(value, indent: int = 2) -> str:
    """Render ``value`` as JSON text.

    Object keys are sorted; whole numbers are written without a fraction.
    An ``indent`` of 0 or less gives compact output.
    """
    out: list = []
    _write(value, out, indent, 0)
    return "".join(out)