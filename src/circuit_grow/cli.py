"""Rich-Click CLI for circuit_grow."""

from __future__ import annotations

import logging
from pathlib import Path

import rich_click as click
from pydantic import ValidationError
from rich.logging import RichHandler

click.rich_click.USE_RICH_MARKUP = True


@click.command()
@click.argument("config_file", required=False, type=click.Path(exists=True, path_type=Path))
@click.option("--width", type=click.FloatRange(min=1), default=800, show_default=True, help="Canvas width in px.")
@click.option("--height", type=click.FloatRange(min=1), default=450, show_default=True, help="Canvas height in px.")
@click.option("--frames", type=click.IntRange(min=1), default=300, show_default=True, help="Number of frames to simulate.")
@click.option("--fps", type=click.FloatRange(min=0, min_open=True), default=30, show_default=True, help="Simulated frame rate.")
@click.option(
    "--output-dir",
    type=click.Path(path_type=Path),
    default=Path("output"),
    show_default=True,
    help="Output directory for generated files.",
)
@click.option("--viz/--no-viz", default=True, show_default=True, help="Generate animated HTML visualization.")
@click.option("--open-browser", is_flag=True, default=False, show_default="False", help="Auto-open HTML after generation.")
@click.option("--report/--no-report", default=True, show_default=True, help="Generate and print an ASCII summary report.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity.",
)
def generate(
    config_file: Path | None,
    width: float,
    height: float,
    frames: int,
    fps: float,
    output_dir: Path,
    viz: bool,
    open_browser: bool,
    report: bool,
    log_level: str,
) -> None:
    """Grow and scroll a circuit board animation, configured by optional CONFIG_FILE."""
    from circuit_grow.animation import run_frames
    from circuit_grow.config import Config, load_config

    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )

    try:
        if config_file is not None:
            click.echo(f"Loading config: {config_file}")
            config = load_config(config_file)
        else:
            click.echo("Using default config")
            config = Config()
    except ValidationError as exc:
        raise click.BadParameter(str(exc), param_hint="CONFIG_FILE") from exc

    rng = config.make_rng()

    click.echo(f"Simulating {frames} frames at {fps:g} fps...")
    views = []
    state = None
    for state, view in run_frames(config, width, height, frames, fps, rng):
        if viz:
            views.append(view)
    output_dir.mkdir(parents=True, exist_ok=True)

    if report:
        from circuit_grow.reporter import generate_report

        summary_text = generate_report(state, config, width, height)
        click.echo(summary_text)
        summary_path = output_dir / "circuit_summary.txt"
        summary_path.write_text(summary_text + "\n")
        click.echo(f"Writing summary report: {summary_path}")

    if viz:
        from circuit_grow.visualize import render_animation

        viz_path = output_dir / "circuit_animation.html"
        click.echo(f"Rendering visualization: {viz_path}")
        render_animation(views, config, viz_path, fps=fps, open_browser=open_browser)

    click.echo("Done!")


# Keep the public CLI symbol name stable for __main__/entry points.
app = generate
