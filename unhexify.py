"""
Reverse conversion of hex dumps back into binary data.

Understands the default dump layout:

    00000010: 48 65 6C 6C 6F 0A           Hello.

The address is hexadecimal, the byte field runs up to the first double
space and may group digit pairs (``4865 6C6C``) in either case.
Dumps produced with ``-p`` or in a non-hex format are not supported.
"""

from hexify import XxdError, SinkWriteFailure


class ParseError(XxdError, ValueError):
    def __init__(self, message, line_no=None):
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no


def parse_line(text, line_no=None):
    text = text.rstrip("\r\n")
    head, sep, rest = text.partition(": ")
    if not sep:
        raise ParseError(f"missing address in '{text}'", line_no)
    try:
        address = int(head, 16)
    except ValueError:
        raise ParseError(f"invalid address '{head}'", line_no) from None
    field = rest.split("  ", 1)[0]
    digits = "".join(field.split())
    if len(digits) % 2:
        raise ParseError(f"odd number of hex digits in '{field.strip()}'", line_no)
    try:
        data = bytes.fromhex(digits)
    except ValueError:
        raise ParseError(f"invalid hex digits in '{field.strip()}'", line_no) from None
    return address, data


def unhexify(lines):
    for line_no, line in enumerate(lines, 1):
        if not line.strip():
            continue
        yield parse_line(line, line_no)


def convert(lines, sink):
    base = None
    written = 0

    def write(data):
        try:
            sink.write(data)
        except OSError as e:
            raise SinkWriteFailure(f"cannot write output at offset {written}: {e}") from e

    for address, data in unhexify(lines):
        if base is None:
            base = address
        position = address - base
        if position < written:
            raise ParseError(f"address {address:08X} goes backwards")
        if position > written:
            write(bytes(position - written))
            written = position
        write(data)
        written += len(data)
    return written
