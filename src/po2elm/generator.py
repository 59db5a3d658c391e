import logging
from collections import defaultdict
from collections.abc import Sequence

from po2elm.classes import Key, MissingTranslation, Po, function_name
from po2elm.exceptions import (
    CatalogNotFoundError,
    IdentifierCollisionError,
    MissingTranslationError,
)

logger = logging.getLogger(__name__)

INDENT = "    "


def elm_string(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


def unify_keys(catalogs: Sequence[Po]) -> list[Key]:
    """Collect the distinct (msgid, is_plural) pairs of all catalogs.

    The empty msgid belongs to the catalog metadata header and is skipped.
    The result is sorted so that generated modules are reproducible.
    """
    keys = {
        Key(msg.msgid, msg.is_plural)
        for po in catalogs
        for msg in po.msgs
        if msg.msgid
    }
    return sorted(keys)


def find_collisions(keys: Sequence[Key]) -> dict[str, list[Key]]:
    by_name: dict[str, list[Key]] = defaultdict(list)
    for key in keys:
        by_name[key.function_name].append(key)
    return {name: group for name, group in by_name.items() if len(group) > 1}


def check_collisions(keys: Sequence[Key]) -> None:
    collisions = find_collisions(keys)
    if collisions:
        raise IdentifierCollisionError(collisions)


def find_missing(
    catalogs: Sequence[Po], keys: Sequence[Key]
) -> list[MissingTranslation]:
    missing = []
    for po in catalogs:
        msgids = {msg.msgid for msg in po.msgs}
        for key in keys:
            if key.msgid not in msgids:
                missing.append(MissingTranslation(po.lang, key.msgid))
    return missing


def check_missing(catalogs: Sequence[Po], keys: Sequence[Key]) -> None:
    missing = find_missing(catalogs, keys)
    if missing:
        for item in missing:
            logger.debug(f"{item.lang} has no translation for {item.msgid!r}")
        raise MissingTranslationError(missing)


def render_plural(forms: Sequence[str]) -> list[str]:
    if len(forms) == 1:
        return [elm_string(forms[0])]

    lines = []
    last = len(forms) - 1
    for index, form in enumerate(forms):
        if index == 0:
            lines.append("if n <= 1 then")
        elif index == last:
            lines.append("else")
        else:
            lines.append(f"else if n == {index + 1} then")
        lines.append(INDENT + elm_string(form))
        if index != last:
            lines.append("")
    return lines


def render_function(key: Key, catalogs: Sequence[Po], lang_module: str = "Lang") -> str:
    name = key.function_name
    if key.is_plural:
        lines = [f"{name} : {lang_module} -> Int -> String", f"{name} lang n ="]
    else:
        lines = [f"{name} : {lang_module} -> String", f"{name} lang ="]
    lines.append(INDENT + "case lang of")

    for index, po in enumerate(catalogs):
        msg = po.find(key.msgid)
        if msg is None:
            raise MissingTranslationError([MissingTranslation(po.lang, key.msgid)])

        if index:
            lines.append("")
        lines.append(INDENT * 2 + f"{lang_module}.{po.lang} ->")
        if key.is_plural:
            body = render_plural(msg.msgstr)
        else:
            body = [elm_string(msg.msgstr[0])]
        lines.extend(INDENT * 3 + line if line else line for line in body)

    return "\n".join(lines) + "\n"


def render_module(
    catalogs: Sequence[Po], module_name: str = "Strings", lang_module: str = "Lang"
) -> str:
    """Render the complete ``Strings`` module for the given catalogs.

    Raises ``IdentifierCollisionError`` or ``MissingTranslationError`` before
    anything is rendered when the catalogs cannot produce a consistent module.
    """
    keys = unify_keys(catalogs)
    check_collisions(keys)
    check_missing(catalogs, keys)
    logger.info(f"Generating {len(keys)} functions for {len(catalogs)} languages")

    parts = [
        f"module {module_name} exposing (..)\n",
        f"import {lang_module} exposing ({lang_module})\n\n",
    ]
    parts.extend(render_function(key, catalogs, lang_module) + "\n" for key in keys)
    return "\n".join(parts)


def render_lang_module(tags: Sequence[str], module_name: str = "Lang") -> str:
    if not tags:
        raise CatalogNotFoundError(f"No language tags to declare in {module_name}")
    lines = [f"module {module_name} exposing ({module_name}(..))", "", ""]
    lines.append(f"type {module_name}")
    for index, tag in enumerate(tags):
        lines.append(INDENT + ("= " if index == 0 else "| ") + tag)
    return "\n".join(lines) + "\n"
