"""Render a Components map as TSX component source."""

from __future__ import annotations

import re

from mistcss.errors import MissingTagError, ParseFailure
from mistcss.model.component import AttributeSpec, Component, Components, EnumAttribute

__all__ = ["BANNER", "render", "render_component"]

BANNER = "// Generated by mistcss, do not modify"

_IDENTIFIER_RE = re.compile(r"[A-Za-z_$][\w$]*")

# Names the generated function already binds.
_GENERATED_PARAMS = frozenset({"children", "props"})

_RESERVED_WORDS = frozenset(
    """
    await break case catch class const continue debugger default delete do
    else enum export extends false finally for function if implements import
    in instanceof interface let new null package private protected public
    return static super switch this throw true try typeof var void while with
    yield
    """.split()
)


def _ts_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _check_identifier(name: str) -> None:
    if not _IDENTIFIER_RE.fullmatch(name) or name in _RESERVED_WORDS:
        raise ParseFailure(f"Component name {name!r} is not a valid identifier")


def _check_attribute(component: str, attribute: str) -> None:
    if (
        not _IDENTIFIER_RE.fullmatch(attribute)
        or attribute in _RESERVED_WORDS
        or attribute in _GENERATED_PARAMS
    ):
        raise ParseFailure(
            f"Attribute {attribute!r} of component {component!r} cannot be used as a prop name"
        )


def _field_type(spec: AttributeSpec) -> str:
    if isinstance(spec, EnumAttribute):
        return " | ".join(_ts_string(value) for value in spec.values)
    return "boolean"


def _render_props(name: str, component: Component) -> str:
    lines = [f"type {name}Props = {{", "  children?: React.ReactNode"]
    for attribute, spec in component.data.items():
        lines.append(f"  {attribute}?: {_field_type(spec)}")
    lines.append(f"}} & JSX.IntrinsicElements['{component.tag}']")
    return "\n".join(lines)


def _render_bindings(component: Component) -> str:
    return "".join(
        f" data-{spec.attribute or attribute}={{{attribute}}}"
        for attribute, spec in component.data.items()
    )


def render_component(name: str, component: Component) -> str:
    """Render the props type and function definition for one component.

    Raises MissingTagError for an unbound component and ParseFailure when the
    component or one of its attributes has no usable TypeScript name.
    """
    if not component.is_bound:
        raise MissingTagError(name)
    _check_identifier(name)
    for attribute in component.data:
        _check_attribute(name, attribute)

    params = ", ".join(["children", *component.data, "...props"])
    class_name = component.class_name or name
    return (
        f"{_render_props(name, component)}\n"
        "\n"
        f"export function {name}({{ {params} }}: {name}Props) {{\n"
        "  return (\n"
        f'    <{component.tag} {{...props}} className="{class_name}"{_render_bindings(component)}>\n'
        "      {children}\n"
        f"    </{component.tag}>\n"
        "  )\n"
        "}\n"
    )


def render(components: Components, module_name: str) -> str:
    """Render every component, in map order, under the banner and CSS import.

    Raises MissingTagError for a component that never got a tag binding.
    """
    parts = [f"{BANNER}\nimport './{module_name}.mist.css'\n"]
    for name, component in components.items():
        parts.append(render_component(name, component))
    return "\n".join(parts).strip()
