"""Print the content of a stored object."""

import click
from got.core.errors import GotError
from got.core.store import locate_repository, load_object
from got.cli.output import error


@click.command('cat-file')
@click.argument('kind')
@click.argument('object_name')
def cat_file_cmd(kind, object_name):
    """
    Write the raw content of OBJECT_NAME to stdout.

    KIND is the expected object kind; the command fails if the stored
    object has a different kind. OBJECT_NAME must be a full hash.

    Examples:
        got cat-file blob ce013625030ba8dba906f756967f9e9ca394464a
    """
    try:
        repo = locate_repository()
        object_hash = repo.objects.resolve(object_name)
        payload = load_object(repo, object_hash, kind)
    except GotError as e:
        click.echo(error(f"cat-file failed: {e}"), err=True)
        raise click.Abort()

    click.echo(payload, nl=False)
