"""Rewrite optional markers inside one interface block of a definitions document.

The scan is a forward, line-oriented state machine over raw text rather than a
TypeScript parse: the document grows by appends and is only loosely
structured, so only brace depth and field-declaration lines matter.

States:

``SEARCHING``
    Looking for the first ``interface <Name>`` anchor line.
``IN_BLOCK``
    Inside the located block; field lines are rewritten while depth > 0.
``DONE``
    The block closed. Later lines, including further interfaces with the
    same name, pass through untouched.
"""

import logging
import re
from enum import Enum

from typesync.core.naming import pascal_case
from typesync.document.file import DefinitionsDocument
from typesync.models import ReconcileResult

logger = logging.getLogger(__name__)

_FIELD_LINE = re.compile(r"^(?P<indent>\s*)(?P<name>[A-Za-z_$][\w$]*)(?P<optional>\?)?(?P<rest>:.*)$")
_INTERFACE_HEADER = re.compile(r"^\s*(export\s+)?interface\s+(?P<name>[A-Za-z_$][\w$]*)")


class _State(Enum):
    SEARCHING = "searching"
    IN_BLOCK = "in_block"
    DONE = "done"


def anchor_pattern(model_name: str) -> re.Pattern[str]:
    interface_name = re.escape(pascal_case(model_name))
    return re.compile(rf"^\s*(export\s+)?interface\s+{interface_name}\s*(\{{|extends|$)")


def rewrite_field_line(line: str, required: set[str]) -> str:
    """Add or drop the ``?`` before the colon of a field line; other lines are returned as-is."""
    match = _FIELD_LINE.match(line)
    if match is None:
        return line
    marker = "" if match["name"] in required else "?"
    return f"{match['indent']}{match['name']}{marker}{match['rest']}"


def reconcile(text: str, model_name: str, required: set[str]) -> tuple[str, ReconcileResult]:
    anchor = anchor_pattern(model_name)
    state = _State.SEARCHING
    depth = 0
    result = ReconcileResult(interface=pascal_case(model_name))
    out: list[str] = []

    for raw in text.split("\n"):
        body, ending = (raw[:-1], "\r") if raw.endswith("\r") else (raw, "")

        if state is _State.SEARCHING:
            if anchor.match(body):
                state = _State.IN_BLOCK
                depth = body.count("{")
                result.located = True
            out.append(raw)
            continue

        if state is _State.DONE:
            out.append(raw)
            continue

        depth += body.count("{") - body.count("}")
        if depth <= 0:
            state = _State.DONE
            out.append(raw)
            continue

        rewritten = rewrite_field_line(body, required)
        if rewritten != body:
            result.changed_lines += 1
        out.append(rewritten + ending)

    if state is _State.IN_BLOCK:
        result.unbalanced = True
        logger.warning(
            "Interface %s never closed; rewrote field lines through end of document",
            result.interface,
        )

    result.changed = result.changed_lines > 0
    return "\n".join(out), result


def reconcile_document(document: DefinitionsDocument, model_name: str, required: set[str]) -> ReconcileResult:
    if not document.exists():
        logger.info("No definitions document at %s; nothing to reconcile", document.path)
        return ReconcileResult(interface=pascal_case(model_name))

    text, result = reconcile(document.read(), model_name, required)
    if not result.located:
        logger.info("No interface %s in %s; nothing to reconcile", result.interface, document.path)
        return result

    if result.changed:
        document.write(text)
        logger.info("Reconciled %d field line(s) of %s", result.changed_lines, result.interface)
    return result


def find_interfaces(text: str) -> list[tuple[int, str]]:
    """Return ``(line_number, name)`` for every interface header, duplicates included."""
    return [
        (number, match["name"])
        for number, line in enumerate(text.split("\n"), start=1)
        if (match := _INTERFACE_HEADER.match(line))
    ]
