"""CLI interface for casebrowser using Click."""

from __future__ import annotations

import asyncio
import json
import subprocess
import sys
from pathlib import Path

import click
from dotenv import load_dotenv

load_dotenv()


def _build_controller(cfg, baseline_source: str | None):
    from casebrowser.catalog.session import SearchSessionController
    from casebrowser.dashboard.data_loader import load_baseline
    from casebrowser.search.client import SemanticSearchClient

    loaded = load_baseline(baseline_source or str(cfg.catalog.baseline_source), timeout=float(cfg.search.timeout_sec))
    for msg in loaded.warnings:
        click.echo(f"warning: {msg}", err=True)
    client = SemanticSearchClient.from_config(cfg)
    return SearchSessionController(
        client.search,
        loaded.records,
        result_limit=int(cfg.search.result_limit),
        page_size=int(cfg.catalog.page_size),
    )


def _apply_facets(controller, year: str | None, policy_area: str | None, sort: str | None) -> None:
    controller.set_year(year)
    controller.set_policy_area(policy_area)
    if sort is not None:
        controller.set_sort_mode(sort)


def _echo_page(controller, page_index: int, fmt: str, case_url_template: str) -> None:
    from casebrowser.catalog.highlight import highlight_segments
    from casebrowser.dashboard.view_utils import case_url, format_score, page_label, result_message

    if page_index != 1 and not controller.go_to_page(page_index):
        raise click.UsageError(f"Page {page_index} is out of range.")
    view = controller.view()
    page = controller.page()

    if fmt == "json":
        payload = {
            "message": result_message(len(view), controller.search_term, controller.is_search_mode),
            "page": page.page_index,
            "total_pages": page.total_pages,
            "total_results": len(view),
            "items": [record.to_dict() for record in page.items],
        }
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    click.echo(result_message(len(view), controller.search_term, controller.is_search_mode))
    click.echo(page_label(page))
    for record in page.items:
        click.echo("")
        header = f"{record.case_number} | {record.year} | {record.policy_area}"
        score = format_score(getattr(record, "score", None))
        if score:
            header += f" | score {score}"
        click.secho(header, bold=True)
        click.echo(f"  Topic: {record.topic}")
        click.echo(f"  Case: {case_url(record, case_url_template)}")
        if record.link:
            click.echo(f"  Decision: {record.link}")
        text = "".join(
            click.style(seg.text, fg="yellow", bold=True) if seg.emphasized else seg.text
            for seg in highlight_segments(record.text, controller.search_term)
        )
        click.echo(f"  {text}")


_facet_options = [
    click.option("--baseline", "-b", "baseline_source", default=None, help="Baseline JSON path or URL"),
    click.option("--year", "-y", default=None, help="Only show cases decided in this year"),
    click.option("--policy-area", "-p", default=None, help="Only show cases in this policy area"),
    click.option("--page", "page_index", default=1, type=int, show_default=True, help="Page number"),
    click.option("--format", "-f", "fmt", default="text", type=click.Choice(["text", "json"])),
]


def _with_facet_options(func):
    for option in reversed(_facet_options):
        func = option(func)
    return func


@click.group()
@click.option("--config", "-c", default=None, help="Path to custom YAML config")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """casebrowser: browse and semantically search the case catalog."""
    from casebrowser.utils.config import load_config

    overrides = {}
    if verbose:
        overrides["general.log_level"] = "DEBUG"

    cfg = load_config(overrides=overrides or None, config_path=config)
    ctx.ensure_object(dict)
    ctx.obj["cfg"] = cfg
    ctx.obj["config_path"] = config

    from casebrowser.utils.logger import setup_logger
    setup_logger("casebrowser", level=cfg.general.log_level)


@cli.command()
@_with_facet_options
@click.option(
    "--sort",
    "-s",
    default="newest",
    show_default=True,
    type=click.Choice(["newest", "oldest"]),
    help="Order by decision year",
)
@click.pass_context
def browse(
    ctx: click.Context,
    baseline_source: str | None,
    year: str | None,
    policy_area: str | None,
    page_index: int,
    fmt: str,
    sort: str,
) -> None:
    """List baseline cases with optional year / policy-area filters."""
    cfg = ctx.obj["cfg"]
    controller = _build_controller(cfg, baseline_source)
    _apply_facets(controller, year, policy_area, sort)
    _echo_page(controller, page_index, fmt, str(cfg.links.case_url_template))


@cli.command()
@click.argument("query")
@_with_facet_options
@click.option("--limit", "-n", default=None, type=int, help="Maximum number of matches to request")
@click.pass_context
def search(
    ctx: click.Context,
    query: str,
    baseline_source: str | None,
    year: str | None,
    policy_area: str | None,
    page_index: int,
    fmt: str,
    limit: int | None,
) -> None:
    """Run a semantic search and list the ranked matches."""
    cfg = ctx.obj["cfg"]
    controller = _build_controller(cfg, baseline_source)
    if limit is not None:
        controller.result_limit = limit
    if query.strip() and not asyncio.run(controller.submit(query)):
        click.echo(f"Error: search for {query.strip()!r} failed", err=True)
        raise SystemExit(1)
    _apply_facets(controller, year, policy_area, None)
    _echo_page(controller, page_index, fmt, str(cfg.links.case_url_template))


@cli.command()
@click.pass_context
def years(ctx: click.Context) -> None:
    """Print the decision years offered by the year filter."""
    from casebrowser.catalog.facets import year_options

    cfg = ctx.obj["cfg"]
    for year in year_options(first_year=int(cfg.catalog.first_year)):
        click.echo(year)


@cli.command()
@click.option("--port", default=None, type=int, help="Port for the Streamlit server")
@click.pass_context
def dashboard(ctx: click.Context, port: int | None) -> None:
    """Launch the Streamlit catalog dashboard."""
    import os

    app_path = Path(__file__).resolve().parent / "dashboard" / "app.py"
    cmd = [sys.executable, "-m", "streamlit", "run", str(app_path)]
    if port is not None:
        cmd += ["--server.port", str(port)]

    env = dict(os.environ)
    config_path = ctx.obj.get("config_path")
    if config_path:
        env["CASEBROWSER_CONFIG"] = str(Path(config_path).resolve())
    raise SystemExit(subprocess.call(cmd, env=env))


if __name__ == "__main__":
    cli()
