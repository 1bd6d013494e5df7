import enum
import collections


class Language(enum.Enum):
    C = "c"
    CPP = "cpp"
    RUST = "rust"
    PYTHON = "python"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, name):
        try:
            return cls(name.lower())
        except ValueError:
            return cls.UNKNOWN


_TemplateBase = collections.namedtuple(
    "_TemplateBase", "prefix separator suffix bytes_per_line", defaults=(16,))


class Template(_TemplateBase):
    __slots__ = ()

    def literal(self, byte):
        return f"0x{byte:02X}"

    def render(self, data):
        if len(data) <= self.bytes_per_line:
            elements = f"{self.separator} ".join(map(self.literal, data))
            return f"{self.prefix} {elements} {self.suffix}"
        lines = []
        for i in range(0, len(data), self.bytes_per_line):
            chunk = data[i:i + self.bytes_per_line]
            lines.append("    " + f"{self.separator} ".join(map(self.literal, chunk)))
        body = f"{self.separator}\n".join(lines)
        return f"{self.prefix}\n{body}\n{self.suffix}"


TEMPLATES = {
    Language.C: Template("const char data[] = {", ",", "};"),
    Language.CPP: Template("const char data[] = {", ",", "};"),
    Language.RUST: Template("pub const DATA: &[u8] = &[", ",", "];"),
    Language.PYTHON: Template("data = [", ",", "]"),
    Language.UNKNOWN: Template("", ",", ""),
}


def template_for(language):
    if not isinstance(language, Language):
        language = Language.parse(language)
    return TEMPLATES[language]


def render_template(data, language):
    return template_for(language).render(data)
