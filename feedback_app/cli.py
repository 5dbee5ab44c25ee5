import click
from flask import current_app
from flask.cli import AppGroup

from feedback_app.services.aggregation import Window
from feedback_app.services.dashboard import DashboardState
from feedback_app.services.export_service import PDF_FILENAME, XLSX_FILENAME, export_pdf, export_xlsx
from feedback_app.services.feedback_client import FeedbackClient

feedback_cli = AppGroup("feedback", help="Ringkasan & ekspor feedback lewat HTTP API.")

WINDOW_CHOICE = click.Choice([w.value for w in Window])


def _fetch_state(api_url):
    client = FeedbackClient(
        base_url=api_url or current_app.config["FEEDBACK_API_URL"],
        timeout=current_app.config.get("FEEDBACK_API_TIMEOUT", 15),
    )
    state = DashboardState(client.fetch_all)
    if not state.refresh():
        raise click.ClickException(f"Tidak bisa mengambil feedback dari {client.feedback_url}")
    return state


@feedback_cli.command("summary")
@click.option("--window", type=WINDOW_CHOICE, default="all", show_default=True)
@click.option("--api-url", default=None, help="Base URL API (default FEEDBACK_API_URL).")
def summary(window, api_url):
    """Cetak histogram rating & lokasi untuk window terpilih."""
    result = _fetch_state(api_url).view(window)

    click.echo(f"Window: {result.window.value} ({result.total} feedback)")
    click.echo("Ratings:")
    for label, count in result.rating_counts.items():
        click.echo(f"  {label:<10} {count}")
    click.echo("Locations:")
    for label, count in result.location_counts.items():
        click.echo(f"  {label:<10} {count}")

    if result.unrecognized_ratings or result.unrecognized_locations:
        click.echo(
            f"Unrecognized: rating={result.unrecognized_ratings} "
            f"location={result.unrecognized_locations}"
        )


@feedback_cli.command("export")
@click.option("--window", type=WINDOW_CHOICE, default="all", show_default=True)
@click.option("--format", "fmt", type=click.Choice(["pdf", "xlsx"]), default="pdf", show_default=True)
@click.option("--output", type=click.Path(dir_okay=False), default=None)
@click.option("--api-url", default=None, help="Base URL API (default FEEDBACK_API_URL).")
def export(window, fmt, output, api_url):
    """Ekspor view yang difilter ke PDF / XLSX."""
    result = _fetch_state(api_url).view(window)

    if fmt == "pdf":
        path = export_pdf(result.records, output or PDF_FILENAME)
    else:
        path = export_xlsx(result.records, output or XLSX_FILENAME)

    click.echo(f"{result.total} feedback ditulis ke {path}")
