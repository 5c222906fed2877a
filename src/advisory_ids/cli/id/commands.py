import logging
import sys

import click

from advisory_ids.cli.config import Application
from advisory_ids.identifiers.advisory_id import AdvisoryId, AdvisoryIdError
from advisory_ids.identifiers.aliases import Aliases
from advisory_ids.identifiers.serialization import describe, dumps_json, dumps_toml
from advisory_ids.utils import timer


def _read_ids(identifiers: tuple[str, ...], file: str | None) -> list[str]:
    raw_ids = list(identifiers)
    if file:
        logging.debug(f"Start reading advisory identifiers from {file}")
        with open(file) as f:
            for line in f:
                raw = line.rstrip("\r\n")
                if raw:
                    raw_ids.append(raw)
        logging.debug(f"Finish reading advisory identifiers from {file}")
    return raw_ids


def _parse_all(raw_ids: list[str]) -> list[AdvisoryId]:
    parsed = []
    failures = 0
    for raw in raw_ids:
        try:
            parsed.append(AdvisoryId(raw))
        except AdvisoryIdError as e:
            logging.error(e)
            failures += 1

    if failures:
        logging.error(f"Failed to parse {failures} of {len(raw_ids)} advisory identifiers")
        sys.exit(1)

    return parsed


@click.group(name="id")
@click.pass_obj
def group(_: Application):
    pass


@group.command(name="parse", help="Parse advisory identifiers and print what is known about them")
@click.argument("identifiers", nargs=-1)
@click.option("--file", "-f", type=click.Path(exists=True, dir_okay=False), help="File with one advisory identifier per line")
@click.option("--sort", is_flag=True, default=False, help="Sort by kind, year and identifier")
@click.pass_obj
def parse_ids(cfg: Application, identifiers: tuple[str, ...], file: str | None, sort: bool) -> None:
    raw_ids = _read_ids(identifiers, file)
    with timer(f"parsing {len(raw_ids)} advisory identifiers"):
        parsed = _parse_all(raw_ids)

    if sort:
        parsed.sort()

    click.echo(dumps_json([describe(i) for i in parsed], indent=True).decode())


@group.command(name="url", help="Print the web page URL for advisory identifiers")
@click.argument("identifiers", nargs=-1, required=True)
@click.pass_obj
def id_urls(cfg: Application, identifiers: tuple[str, ...]) -> None:
    for i in _parse_all(list(identifiers)):
        if not i.url:
            logging.warning(f"No URL is known for {i}")
            continue
        click.echo(i.url)


@group.command(name="aliases", help="Group advisory identifiers by kind")
@click.argument("identifiers", nargs=-1)
@click.option("--file", "-f", type=click.Path(exists=True, dir_okay=False), help="File with one advisory identifier per line")
@click.option("--format", "output_format", type=click.Choice(["json", "toml"]), default="json", show_default=True)
@click.pass_obj
def group_aliases(cfg: Application, identifiers: tuple[str, ...], file: str | None, output_format: str) -> None:
    aliases = Aliases.from_ids(_parse_all(_read_ids(identifiers, file)))
    if output_format == "toml":
        click.echo(dumps_toml(aliases), nl=False)
    else:
        click.echo(dumps_json(aliases, indent=True).decode())
