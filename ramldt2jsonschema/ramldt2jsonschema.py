import json
import logging
from pathlib import Path

import click

from .errors import Dt2JsError
from .pipeline import ConverterConfig, Dt2JsConverter


@click.command()
@click.option("--draft", "-d", default=None, type=click.Choice(["04", "06", "07"]))
@click.option(
    "--base-path",
    "-b",
    default=None,
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Directory includes are resolved from (defaults to the RAML file directory)",
)
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--output", "-o", default=None, type=click.Path(resolve_path=True))
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log include and library resolution")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.argument("type_name")
def ramldt2jsonschema(draft, base_path, config, output, verbose, path, type_name):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    with open(path, encoding="utf-8") as f:
        raml_data = f.read()

    if config is not None:
        with open(config) as f:
            config = ConverterConfig.from_dict({"base_path": str(Path(path).parent), **json.load(f)})
    else:
        config = ConverterConfig(base_path=str(Path(path).parent))

    # CLI flags override the config file
    if base_path is not None:
        config.base_path = base_path
    if draft is not None:
        config.draft = draft

    try:
        schema = Dt2JsConverter(config).convert(raml_data, type_name)
    except Dt2JsError as e:
        raise click.ClickException(str(e)) from e

    out = json.dumps(schema, indent=2)
    if output is None:
        click.echo(out)
    else:
        with open(output, "w", encoding="utf-8") as f:
            f.write(out + "\n")
