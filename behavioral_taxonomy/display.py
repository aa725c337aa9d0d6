"""Themed terminal display: console, semantic styles, record renderers."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

from behavioral_taxonomy.models import BehavioralCategory, BehavioralLoop, CognitiveBias, Emotion, PersonalityTrait, enum_value

# -- Theme palettes (keyed by theme name) ------------------------------------

_THEMES: dict[str, dict[str, str]] = {
    "dark":  {"status": "yellow",      "info": "cyan", "accent": "bold cyan", "error": "bold red", "success": "green", "warning": "orange3", "hint": "dim"},
    "light": {"status": "dark_orange", "info": "blue", "accent": "bold blue", "error": "bold red", "success": "green", "warning": "orange3", "hint": "dim"},
}

# -- Console (single instance, themed) --------------------------------------

# Settings pick the theme once the CLI starts (see set_theme)
console = Console(theme=Theme(_THEMES["light"]))

# -- Indicators ------------------------------------------------------------

ERROR       = "✖"
INFO        = "◈"

# -- Theme switching -------------------------------------------------------


def set_theme(name: str) -> None:
    """Switch the console theme at runtime (e.g. from --theme flag)."""
    console.push_theme(Theme(_THEMES.get(name, _THEMES["light"])))


# -- Display helpers -------------------------------------------------------


def display_error(message: str, hint: str | None = None) -> None:
    """Red-bordered panel with optional recovery hint."""
    body = f"[bold red]{ERROR} {escape(message)}[/bold red]"
    if hint:
        body += f"\n[dim]{hint}[/dim]"
    console.print(Panel(body, border_style="red", title="Error", title_align="left"))


def display_info(message: str) -> None:
    """Themed info message."""
    console.print(f"[info]{INFO} {message}[/info]")


# -- Record renderers ------------------------------------------------------


def _fmt_number(value: float) -> str:
    return f"{value:g}"


def render_loops_table(loops: list[BehavioralLoop], title: str = "Behavioral Loops") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="accent", justify="right")
    table.add_column("Name")
    table.add_column("Origin", style="info")
    table.add_column("Valences")
    table.add_column("Difficulty", justify="right")
    table.add_column("Tags", style="hint")

    for loop in loops:
        table.add_row(
            str(loop.id),
            loop.name,
            enum_value(loop.taxonomy.origin),
            ", ".join(enum_value(v) for v in loop.taxonomy.valences),
            _fmt_number(loop.intervention.difficulty),
            ", ".join(loop.meta.tags),
        )
    return table


def render_loop_panel(loop: BehavioralLoop) -> Panel:
    """Full detail view of a single loop."""
    tax = loop.taxonomy
    mutability = _fmt_number(tax.mutability) if isinstance(tax.mutability, float) else enum_value(tax.mutability)
    v = loop.veracity
    iv = loop.intervention

    lines = [
        f"[accent]Given[/accent]  {loop.logic.given}",
        f"[accent]When[/accent]   {loop.logic.when}",
        f"[accent]Then[/accent]   {loop.logic.then}",
        f"[accent]Result[/accent] {loop.logic.result}",
        "",
        f"[info]Origin[/info] {enum_value(tax.origin)}  [info]Modality[/info] {enum_value(tax.modality)}  "
        f"[info]Mutability[/info] {mutability}",
        f"[info]Valences[/info] {', '.join(enum_value(x) for x in tax.valences) or '—'}",
        f"[info]Operator[/info] {loop.operator.name}: {loop.operator.mechanism}",
        "",
        f"[info]Veracity[/info] grounding {_fmt_number(v.objective_grounding)}, "
        f"consensus {_fmt_number(v.social_consensus)}, "
        f"amplification {_fmt_number(v.recursive_amplification)}, "
        f"friction {_fmt_number(v.friction_index)}",
        f"[info]Intervention difficulty[/info] {_fmt_number(iv.difficulty)}/10",
    ]
    for label, text in (
        ("Interdict", iv.interdict),
        ("Minimize", iv.minimize),
        ("Recognize", iv.recognize),
        ("Leverage", iv.leverage),
    ):
        if text:
            lines.append(f"  [success]{label}[/success] {text}")
    lines.append("")
    lines.append(f"[hint]Tags: {', '.join(loop.meta.tags) or '—'}[/hint]")
    if loop.meta.related_archetypes:
        lines.append(f"[hint]Archetypes: {', '.join(loop.meta.related_archetypes)}[/hint]")
    if loop.meta.academic_fields:
        lines.append(f"[hint]Fields: {', '.join(loop.meta.academic_fields)}[/hint]")

    return Panel("\n".join(lines), title=f"#{loop.id} {loop.name}", title_align="left", border_style="accent")


def render_emotions_table(emotions: list[Emotion]) -> Table:
    table = Table(title="Emotions")
    table.add_column("ID", style="accent")
    table.add_column("Name")
    table.add_column("Level", style="info")
    table.add_column("Valence")
    table.add_column("Arousal")
    table.add_column("Description", style="hint")
    for e in emotions:
        table.add_row(e.id, e.name, e.level, e.valence, e.arousal, e.description)
    return table


def render_biases_table(biases: list[CognitiveBias]) -> Table:
    table = Table(title="Cognitive Biases")
    table.add_column("ID", style="accent")
    table.add_column("Name")
    table.add_column("Category", style="info")
    table.add_column("Definition", style="hint")
    for b in biases:
        table.add_row(b.id, b.name, b.category, b.definition)
    return table


def render_traits_table(traits: list[PersonalityTrait]) -> Table:
    table = Table(title="Personality Traits")
    table.add_column("ID", style="accent")
    table.add_column("Name")
    table.add_column("Dimension", style="info")
    table.add_column("Opposing", style="info")
    table.add_column("Definition", style="hint")
    for t in traits:
        table.add_row(t.id, t.name, t.dimension or "—", t.opposing_trait or "—", t.definition)
    return table


def render_categories_table(categories: list[BehavioralCategory]) -> Table:
    table = Table(title="Loop Categories")
    table.add_column("#", style="accent", justify="right")
    table.add_column("ID", style="info")
    table.add_column("Name")
    table.add_column("Loops", justify="right")
    table.add_column("Description", style="hint")
    for c in categories:
        table.add_row(str(c.category_number), c.id, c.name, str(len(c.loops)), c.description)
    return table
