import logging
from typing import NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from behavioral_taxonomy._errors import DatasetError
from behavioral_taxonomy.config import get_settings
from behavioral_taxonomy.display import (
    console,
    display_error,
    display_info,
    render_biases_table,
    render_categories_table,
    render_emotions_table,
    render_loop_panel,
    render_loops_table,
    render_traits_table,
    set_theme,
)
from behavioral_taxonomy.lexicon import get_biases, get_emotions, get_emotions_by_level, get_traits
from behavioral_taxonomy.loops import (
    find_loops_by_origin,
    find_loops_by_tag,
    find_loops_by_valence,
    get_all_loops,
    get_categories,
    get_loop_by_id,
    get_loops_by_category,
    search_loops,
)
from behavioral_taxonomy.stats import get_statistics, render_statistics_table

app = typer.Typer(
    help="Browse the behavioral loop, emotion, bias and trait taxonomy.",
    context_settings={"help_option_names": ["--help", "-h"]},
    no_args_is_help=True,
)

_DATA_DIR_HINT = "Check BEHAVIORAL_TAXONOMY_DATA_DIR or the data_dir setting."
_SETTINGS_HINT = "Check the BEHAVIORAL_TAXONOMY_* environment variables and settings.json files."


@app.callback()
def main(
    theme: str = typer.Option(None, "--theme", "-t", help="Color theme: dark or light"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log dataset loading at INFO level"),
):
    """Configure logging and theme before any command runs."""
    try:
        settings = get_settings()
    except ValidationError as e:
        display_error(f"Invalid settings: {e}", hint=_SETTINGS_HINT)
        raise typer.Exit(code=1)

    level = "INFO" if verbose else settings.log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    set_theme(theme or settings.theme)


def _fail(e: DatasetError) -> NoReturn:
    display_error(str(e), hint=_DATA_DIR_HINT)
    raise typer.Exit(code=1)


@app.command()
def stats():
    """Show dataset totals, loops per origin and average intervention difficulty."""
    try:
        info = get_statistics()
    except DatasetError as e:
        _fail(e)
    console.print(render_statistics_table(info))


@app.command()
def categories():
    """List loop categories."""
    try:
        cats = get_categories()
    except DatasetError as e:
        _fail(e)
    console.print(render_categories_table(cats))


@app.command()
def loops(
    category: str = typer.Option(None, "--category", "-c", help="Only loops in this category id"),
    tag: str = typer.Option(None, "--tag", help="Tag substring, case-insensitive"),
    origin: str = typer.Option(None, "--origin", "-o", help="Origin, e.g. DIGITAL"),
    valence: str = typer.Option(None, "--valence", help="Valence, e.g. TRUST"),
    search: str = typer.Option(None, "--search", "-s", help="Free text over name, trigger and outcome"),
):
    """List loops, narrowed by any combination of filters."""
    try:
        selected = get_loops_by_category(category) if category else get_all_loops()
        # Each filter narrows the previous selection by id
        if tag:
            selected = _intersect(selected, find_loops_by_tag(tag))
        if origin:
            selected = _intersect(selected, find_loops_by_origin(origin.upper()))
        if valence:
            selected = _intersect(selected, find_loops_by_valence(valence.upper()))
        if search:
            selected = _intersect(selected, search_loops(search))
    except DatasetError as e:
        _fail(e)

    if not selected:
        display_info("No loops match.")
        return
    console.print(render_loops_table(selected))


def _intersect(selected: list, matches: list) -> list:
    ids = {loop.id for loop in matches}
    return [loop for loop in selected if loop.id in ids]


@app.command()
def loop(loop_id: int = typer.Argument(..., help="Numeric loop id")):
    """Show one loop in full."""
    try:
        found = get_loop_by_id(loop_id)
    except DatasetError as e:
        _fail(e)
    if found is None:
        display_error(f"No loop with id {loop_id}.", hint="Run 'taxonomy loops' to list ids.")
        raise typer.Exit(code=1)
    console.print(render_loop_panel(found))


@app.command()
def emotions(
    level: str = typer.Option(None, "--level", "-l", help="primary, secondary or tertiary"),
):
    """List emotions."""
    try:
        items = get_emotions_by_level(level.lower()) if level else get_emotions()
    except DatasetError as e:
        _fail(e)
    if not items:
        display_info("No emotions match.")
        return
    console.print(render_emotions_table(items))


@app.command()
def biases():
    """List cognitive biases."""
    try:
        items = get_biases()
    except DatasetError as e:
        _fail(e)
    console.print(render_biases_table(items))


@app.command()
def traits():
    """List personality traits."""
    try:
        items = get_traits()
    except DatasetError as e:
        _fail(e)
    console.print(render_traits_table(items))


if __name__ == "__main__":
    app()
