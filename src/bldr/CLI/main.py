"""
Command Line Interface for bldr.
"""
import logging
import click
from ..PARSERS.storage_conf_parser import StorageConfParser
from ..STORAGE.container_store import get_store
from ..LISTING.reconciler import list_containers
from ..RENDERERS.text_renderer import format_table
from ..RENDERERS.json_renderer import format_json
from ..UTILS.errors import BldrError


@click.group()
@click.option('--root', default=None, help='Storage root directory')
@click.option('--storage-driver', default=None, help='Storage driver')
@click.option('--storage-conf', default=None, type=click.Path(dir_okay=False),
              help='Storage configuration file')
@click.option('--debug', is_flag=True, help='Print debugging information')
@click.pass_context
def cli(ctx, root, storage_driver, storage_conf, debug):
    """
    bldr - working container bookkeeping.
    """
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    ctx.ensure_object(dict)
    try:
        options = StorageConfParser().load(storage_conf)
    except BldrError as e:
        raise click.ClickException(str(e))
    if root:
        options.root = root
    if storage_driver:
        options.driver = storage_driver
    ctx.obj['store_options'] = options


@cli.command()
@click.option('--all', '-a', 'all_containers', is_flag=True, help='Also list non-bldr containers')
@click.option('--json', 'json_out', is_flag=True, help='Output in JSON format')
@click.option('--noheading', '-n', is_flag=True, help='Do not print column headings')
@click.option('--notruncate', is_flag=True, help='Do not truncate output')
@click.option('--quiet', '-q', is_flag=True, help='Display only container IDs')
@click.pass_context
def containers(ctx, all_containers, json_out, noheading, notruncate, quiet):
    """
    List working containers and their base images.

    Lists containers which appear to be bldr working containers, their names
    and IDs, and the names and IDs of the images from which they were
    initialized.
    """
    store = get_store(ctx.obj['store_options'])
    try:
        records = list_containers(store, all_containers=all_containers)
    except BldrError as e:
        raise click.ClickException(str(e))

    if json_out:
        click.echo(format_json(records))
        return
    for line in format_table(records, quiet=quiet, noheading=noheading, truncate=not notruncate):
        click.echo(line)


def main():
    """
    Main entry point for the CLI.
    """
    cli(obj={})


if __name__ == '__main__':
    main()
