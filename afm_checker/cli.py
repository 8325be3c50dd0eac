# afm_checker/cli.py
# Flask CLI: flask --app manage afm lookup <AFM> / flask --app manage afm info

import pprint

import click
from flask import current_app
from flask.cli import AppGroup

from .exceptions import AfmCheckerError
from .extensions import get_transport
from .services.lookup_service import lookup, render

afm_cli = AppGroup("afm", help="Query the GSIS RgWsPublic2 registry.")


def _emit(params: dict, output_format: str):
    try:
        payload = lookup(params, get_transport())
    except AfmCheckerError as e:
        raise click.ClickException(str(e)) from e

    fmt = output_format or current_app.config.get("OUTPUT_FORMAT", "json")
    rendered = render(payload, fmt, indent=2)
    click.echo(rendered if isinstance(rendered, str) else pprint.pformat(rendered, sort_dicts=False))
    if not payload["success"]:
        click.get_current_context().exit(1)


@afm_cli.command("lookup")
@click.argument("afm_for")
@click.option("--from", "afm_from", default=None, help="Requester AFM (default: AFM_CALLED_BY or token owner).")
@click.option("--date", "look_date", default=None, help="Reference date YYYY-MM-DD (default: today).")
@click.option("--separator", default=None, help="Activity code group separator.")
@click.option("--format", "output_format", type=click.Choice(["json", "structured"]), default=None)
def lookup_command(afm_for, afm_from, look_date, separator, output_format):
    cfg = current_app.config
    _emit(
        {
            "method": "query",
            "afm_for": afm_for,
            "afm_from": afm_from or cfg.get("AFM_CALLED_BY") or None,
            "look_date": look_date,
            "separator": separator or cfg.get("ACTIVITY_SEPARATOR", "."),
        },
        output_format,
    )


@afm_cli.command("info")
@click.option("--format", "output_format", type=click.Choice(["json", "structured"]), default=None)
def info_command(output_format):
    _emit({"method": "info"}, output_format)
