"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text
from rich.tree import Tree

from gqlnno.domain.shapes import RECURSIVE_MARKER
from gqlnno.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from gqlnno.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def _status_line(console: Console, result: ServiceResult) -> None:
    line = Text("OK", style="gqlnno.ok")
    line.append(f"  {result.op}", style="gqlnno.op")
    console.print(line)


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


def _field(console: Console, key: str, value: Any) -> None:
    line = Text(f"  {key}: ", style="gqlnno.key")
    line.append(str(value))
    console.print(line)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    line = Text("ERROR", style="gqlnno.error")
    line.append(f"  {result.op}", style="gqlnno.op")
    line.append(f" - {msg}")
    console.print(line)

    paths = err.detail.get("paths") if err else None
    if paths:
        for path in paths:
            console.print(Text(f"  null at {path}", style="gqlnno.path"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


def _add_shape(tree: Tree, shape: dict[str, Any]) -> None:
    for name, entry in shape.items():
        if name == RECURSIVE_MARKER:
            tree.add(Text("(recursive)", style="dim"))
            continue
        label = Text(name)
        if entry.get("non_null_optional"):
            label.append("  non-null-optional", style="gqlnno.path")
        _add_shape(tree.add(label), entry.get("fields", {}))


def _render_shapes(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("[gqlnno.ok]OK[/gqlnno.ok]  No constrained arguments.")
        return

    _status_line(console, result)
    for item in items:
        if verbose:
            tree = Tree(Text(item["coordinate"], style="gqlnno.coordinate"))
            _add_shape(tree, item.get("shape", {}))
            console.print(tree)
            continue
        console.print(Text(item["coordinate"], style="gqlnno.coordinate"))
        for path in item.get("paths", []):
            console.print(Text(f"  {path}", style="gqlnno.path"))
    console.print(f"\n{result.data.get('count', len(items))} guarded fields")
    if verbose:
        _render_meta(console, result)


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    coordinate = result.data.get("coordinate", "")
    if result.data.get("checked"):
        console.print(f"[gqlnno.ok]OK[/gqlnno.ok]  {coordinate}: no forbidden nulls")
    else:
        console.print(f"[gqlnno.ok]OK[/gqlnno.ok]  {coordinate}: no constrained arguments")


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "shapes": _render_shapes,
    "validate": _render_validate,
}
