# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Command Line Interface for propreader.
"""
import json
import logging

import click
import yaml

from ..MODELS.delimiter import Delimiter
from ..MODELS.property_store import PropertyStore
from ..PARSERS.property_file_reader import PropertyFileReader

DELIMITER_CHOICES = [d.value for d in Delimiter]


def _load(ctx, path: str) -> PropertyStore:
    """
    Parses path with the delimiter and encoding chosen on the group.
    """
    reader = PropertyFileReader(Delimiter(ctx.obj['delimiter']))
    try:
        return reader.parse(path, encoding=ctx.obj['encoding'])
    except (UnicodeDecodeError, LookupError) as e:
        raise click.ClickException(f"Cannot decode {path} as {ctx.obj['encoding']}: {e}")


@click.group()
@click.option('--delimiter', '-d', type=click.Choice(DELIMITER_CHOICES), default=Delimiter.EQUALS.value,
              help='Key/value delimiter')
@click.option('--encoding', '-e', default='utf-8', help='File encoding')
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, delimiter, encoding, verbose):
    """
    propreader - read Java-style .properties files.

    Handles comments, key/value delimiters and backslash line continuations.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )
    ctx.ensure_object(dict)
    ctx.obj['delimiter'] = delimiter
    ctx.obj['encoding'] = encoding


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--format', '-F', 'fmt', type=click.Choice(['json', 'yaml', 'text']), default='json',
              help='Output format')
@click.pass_context
def dump(ctx, file, fmt):
    """Print every property in the file, sorted by key."""
    props = _load(ctx, file).to_dict()
    ordered = {key: props[key] for key in sorted(props)}

    if fmt == 'json':
        click.echo(json.dumps(ordered, indent=2, ensure_ascii=False))
    elif fmt == 'yaml':
        click.echo(yaml.safe_dump(ordered, allow_unicode=True, default_flow_style=False, sort_keys=True), nl=False)
    else:
        for key, value in ordered.items():
            click.echo(f"{key}={value}")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.argument('key')
@click.option('--line-number', '-n', is_flag=True, help='Prefix the value with its line number')
@click.pass_context
def get(ctx, file, key, line_number):
    """Print the value of KEY."""
    line = _load(ctx, file).get(key)
    if line is None:
        raise click.ClickException(f"Key '{key}' not found in {file}")

    if line_number:
        click.echo(f"{line.line_number}: {line.value}")
    else:
        click.echo(line.value)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def keys(ctx, file):
    """List the keys defined in the file."""
    for key in sorted(_load(ctx, file).keys()):
        click.echo(key)


def main():
    """
    Main entry point for the CLI.
    """
    cli(obj={})


if __name__ == '__main__':
    main()
