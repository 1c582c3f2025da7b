"""Compute object hashes and optionally store objects."""

import click
from got.core.codec import get_kind, registered_kinds
from got.core.errors import GotError
from got.core.store import locate_repository, store_object
from got.cli.output import error


@click.command('hash-object')
@click.option('-t', '--type', 'kind', type=click.Choice(registered_kinds()), default='blob',
              show_default=True, help='Object kind')
@click.option('-w', '--write', 'persist', is_flag=True, help='Write the object into the object database')
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def hash_object_cmd(kind, persist, file):
    """
    Compute the object hash of FILE.

    With -w the object is also written to the repository containing the
    current directory.

    Examples:
        got hash-object notes.txt       # Print hash only
        got hash-object -w notes.txt    # Hash and store
    """
    try:
        obj = get_kind(kind).from_file(file)
        repo = locate_repository() if persist else None
        object_hash = store_object(repo, obj.kind, obj.serialize(), persist)
    except (GotError, OSError) as e:
        click.echo(error(f"hash-object failed: {e}"), err=True)
        raise click.Abort()

    click.echo(object_hash)
