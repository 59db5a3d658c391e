from dataclasses import dataclass, field


def function_name(msgid: str) -> str:
    """Camel-case a dotted key, e.g. "section.sub_label" -> "sectionSub_label"."""
    name = "".join(segment[:1].upper() + segment[1:] for segment in msgid.split("."))
    return name[:1].lower() + name[1:]


def encode_newlines(text: str) -> str:
    return text.replace("\n", "\\n")


@dataclass
class Msg:
    comment: str = ""
    msgid: str = ""
    msgstr: list[str] = field(default_factory=list)
    is_plural: bool = False

    def to_po(self) -> str:
        lines = [f"#. {line}" for line in self.comment.splitlines()]
        lines.append(f'msgid "{self.msgid}"')
        if len(self.msgstr) == 1 and not self.is_plural:
            lines.append(f'msgstr "{encode_newlines(self.msgstr[0])}"')
        else:
            lines.append('msgid_plural ""')
            for index, msgstr in enumerate(self.msgstr):
                lines.append(f'msgstr[{index}] "{encode_newlines(msgstr)}"')
        return "\n".join(lines) + "\n\n"


@dataclass
class Po:
    lang: str
    msgs: list[Msg] = field(default_factory=list)

    def find(self, msgid: str) -> Msg | None:
        return next((x for x in self.msgs if x.msgid == msgid), None)

    def to_po(self) -> str:
        return "".join(msg.to_po() for msg in self.msgs)


@dataclass(frozen=True, order=True)
class Key:
    msgid: str
    is_plural: bool = False

    @property
    def function_name(self) -> str:
        return function_name(self.msgid)


@dataclass(frozen=True)
class MissingTranslation:
    lang: str
    msgid: str
