from __future__ import annotations

import re
from typing import Iterable

from .constants import UNBOUNDED
from .model import TypeParameter

# Dotted Java names; `$` is allowed so binary names of nested types pass.
JAVA_NAME_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*(?:\.[A-Za-z_$][A-Za-z0-9_$]*)*$")
JAVA_IDENT_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

INDENT = "  "


def assert_java_name(value: str) -> str:
    if not JAVA_NAME_RE.match(value):
        raise ValueError(f"Not a valid Java name: {value!r}")
    return value


def assert_java_ident(value: str) -> str:
    if not JAVA_IDENT_RE.match(value):
        raise ValueError(f"Not a valid Java identifier: {value!r}")
    return value


def java_string(text: str) -> str:
    """Quote text as a Java string literal."""
    out = (
        str(text)
        .replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{out}"'


def indent(level: int, line: str) -> str:
    return INDENT * level + line if line else line


def java_package(name: str) -> str:
    return f"package {assert_java_name(name)};"


def java_import(name: str) -> str:
    return f"import {assert_java_name(name)};"


def java_doc_comment(*lines: str, level: int = 0) -> list[str]:
    out = [indent(level, "/**")]
    for line in lines:
        # Keep a stray terminator from closing the comment early.
        text = str(line).replace("*/", "*&#47;")
        out.append(indent(level, f" * {text}".rstrip()))
    out.append(indent(level, " */"))
    return out


def java_annotation(name: str, value: str | None = None) -> str:
    if value is None:
        return f"@{name}"
    return f"@{name}({value})"


def type_param_def(params: Iterable[TypeParameter]) -> str:
    """Render type parameters for a definition site, e.g. `<T extends A & B> `.

    Returns an empty string when there are no parameters. The trailing space
    separates the clause from the return type.
    """
    rendered: list[str] = []
    for param in params:
        text = assert_java_ident(param.name)
        if param.bounds:
            text += " extends " + " & ".join(param.bounds)
        rendered.append(text)
    if not rendered:
        return ""
    return "<" + ",".join(rendered) + "> "


def type_param_use(params: Iterable[TypeParameter]) -> str:
    """Render type parameters for a use site, e.g. `<T,U>`."""
    names = [assert_java_ident(param.name) for param in params]
    if not names:
        return ""
    return "<" + ",".join(names) + ">"


def version_guard(query: str, min_version: int, max_version: int) -> str:
    """Return the `if (...) ` prefix for a version-scoped statement.

    A bound equal to UNBOUNDED is open on that side; with both open the
    statement is unconditional and the prefix is empty.
    """
    if min_version != UNBOUNDED and max_version != UNBOUNDED:
        return f"if ({query} >= {min_version} && {query} <= {max_version}) "
    if max_version != UNBOUNDED:
        return f"if ({query} <= {max_version}) "
    if min_version != UNBOUNDED:
        return f"if ({query} >= {min_version}) "
    return ""


def java_static_call(owner: str, method: str) -> str:
    return f"{assert_java_name(owner)}.{assert_java_ident(method)}();"
