import logging
import pathlib
from typing import Iterable

from po2elm.classes import Msg, Po
from po2elm.exceptions import CatalogNotFoundError, CatalogParseError

logger = logging.getLogger(__name__)


def quoted(line: str, source: str, line_number: int) -> str:
    """Return the text between the first two double quotes on a line."""
    parts = line.split('"')
    if len(parts) < 3:
        raise CatalogParseError(source, line_number, line)
    return parts[1]


def decode(text: str) -> str:
    return text.replace("\\n", "\n")


def finish(po: Po, msg: Msg, msgstr: str) -> None:
    msg.msgstr.append(msgstr)
    if msg.comment.endswith("\n"):
        msg.comment = msg.comment[:-1]
    po.msgs.append(msg)


def parse_catalog(lang: str, lines: Iterable[str], source: str = "<string>") -> Po:
    po = Po(lang)
    msg = Msg()
    msgstr = ""
    reading_msgstr = False

    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")

        if reading_msgstr:
            if line.startswith('"'):
                msgstr += decode(quoted(line, source, line_number))
            elif line.startswith("msgstr"):
                # Next plural form, the header rule below starts it
                msg.msgstr.append(msgstr)
                msgstr = ""
            elif not line:
                reading_msgstr = False
                finish(po, msg, msgstr)
                msg = Msg()
                msgstr = ""
                continue

        if line.startswith("#."):
            msg.comment += line[2:].strip() + "\n"
        elif line.startswith("msgid "):
            msg.msgid = quoted(line, source, line_number)
        elif line.startswith("msgid_plural"):
            msg.is_plural = True
        elif line.startswith("msgstr"):
            reading_msgstr = True
            msgstr = decode(quoted(line, source, line_number))

    # End of input terminates a record like a blank line would
    if reading_msgstr:
        finish(po, msg, msgstr)

    logger.debug(f"Parsed {len(po.msgs)} messages for {lang} from {source}")
    return po


def parse_po_file(path: str | pathlib.Path) -> Po:
    file = pathlib.Path(path)
    logger.debug(f"Parsing {file}")
    try:
        with file.open("r", encoding="utf-8") as stream:
            return parse_catalog(file.stem, stream, source=str(file))
    except OSError as ex:
        raise CatalogNotFoundError(f"Error reading {file}: {ex}", context=file) from ex
    except UnicodeDecodeError as ex:
        raise CatalogNotFoundError(f"{file} is not valid UTF-8: {ex}", context=file) from ex


def parse_catalogs(path: str | pathlib.Path) -> list[Po]:
    folder = pathlib.Path(path)
    if not folder.is_dir():
        raise CatalogNotFoundError(f"Catalog folder {folder} does not exist", context=folder)

    try:
        files = sorted(x for x in folder.iterdir() if x.suffix == ".po" and x.is_file())
    except OSError as ex:
        raise CatalogNotFoundError(f"Error listing {folder}: {ex}", context=folder) from ex
    if not files:
        raise CatalogNotFoundError(f"No .po catalogs found in {folder}", context=folder)

    catalogs = [parse_po_file(file) for file in files]
    logger.info(f"Parsed {len(catalogs)} catalogs from {folder}")
    return catalogs
