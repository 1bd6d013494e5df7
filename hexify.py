import enum
import collections


class XxdError(Exception):
    pass


class InvalidFormat(XxdError, ValueError):
    def __init__(self, token):
        super().__init__(f"invalid format '{token}' (expected one of: {', '.join(Format.tokens())})")
        self.token = token


class SinkWriteFailure(XxdError):
    pass


class SourceReadFailure(XxdError):
    pass


class Format(enum.Enum):
    HEX_UPPER = "hex"
    HEX_LOWER = "hexlower"
    DECIMAL = "dec"
    OCTAL = "oct"
    BINARY = "bin"

    @classmethod
    def parse(cls, token):
        try:
            return cls(token.lower())
        except ValueError:
            raise InvalidFormat(token) from None

    @classmethod
    def tokens(cls):
        return [f.value for f in cls]

    @property
    def width(self):
        return _CELLS[self][1]

    def cell(self, byte):
        return _CELLS[self][0].format(byte)


# cell format and digit width per format
_CELLS = {
    Format.HEX_UPPER: ("{:02X}", 2),
    Format.HEX_LOWER: ("{:02x}", 2),
    Format.DECIMAL: ("{:03d}", 3),
    Format.OCTAL: ("{:03o}", 3),
    Format.BINARY: ("{:08b}", 8),
}


_SettingsBase = collections.namedtuple(
    "_SettingsBase",
    "start_address show_address group_size columns show_interpretation use_separator format",
    defaults=(0, True, 1, 8, True, True, Format.HEX_UPPER))


class Settings(_SettingsBase):
    __slots__ = ()

    @property
    def bytes_per_line(self):
        return self.columns * self.group_size

    @property
    def field_width(self):
        width = self.bytes_per_line * self.format.width
        if self.use_separator:
            width += self.columns
        return width


class Hexify:
    def __init__(self, settings=None):
        self.settings = settings or Settings()
        self.width = self.settings.bytes_per_line
        self.field_width = self.settings.field_width
        self.printables = list(map(self.printable, range(256)))
        self.cells = list(map(self.settings.format.cell, range(256)))
        self.spaced = [cell + " " for cell in self.cells]

    def printable(self, c):
        return chr(c) if 0x20 <= c <= 0x7E else '.'

    def hexify_address(self, address):
        return f"{address:08X}: "

    def hexify_bytes(self, chunk):
        if not self.settings.use_separator:
            return "".join([self.cells[x] for x in chunk])
        group = self.settings.group_size
        return "".join([
            self.spaced[x] if (i + 1) % group == 0 else self.cells[x]
            for i, x in enumerate(chunk)])

    def hexify_line(self, chunk, address=None):
        if address is None:
            address = self.settings.start_address
        parts = []
        if self.settings.show_address:
            parts.append(self.hexify_address(address))
        parts.append("%-*s" % (self.field_width, self.hexify_bytes(chunk)))
        if self.settings.show_interpretation:
            parts.append(" ")
            parts.append("".join([self.printables[x] for x in chunk]))
        return "".join(parts)

    def hexify_data(self, source):
        base_address = self.settings.start_address
        offset = 0
        line = bytearray()
        for byte in source:
            line.append(byte)
            if len(line) == self.width:
                yield self.hexify_line(line, base_address + offset) + "\n"
                offset += len(line)
                line.clear()
        if line:
            yield self.hexify_line(line, base_address + offset) + "\n"


def render_line(chunk, settings=None):
    return Hexify(settings).hexify_line(chunk)


def dump(source, sink, settings=None):
    lines = 0
    for line in Hexify(settings).hexify_data(source):
        try:
            sink.write(line)
        except OSError as e:
            raise SinkWriteFailure(f"cannot write dump line {lines}: {e}") from e
        lines += 1
    return lines
