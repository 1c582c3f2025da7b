"""Initialize a new Got repository."""

import click
from got.core.errors import GotError
from got.core.store import initialize_repository
from got.cli.output import success, error, info


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new Got repository.

    Creates a .got directory with the object database and metadata files.
    PATH must not exist yet, or be an empty directory.

    Examples:
        got init                    # Initialize in current directory
        got init my-project         # Initialize in my-project directory
    """
    try:
        repo = initialize_repository(path)
    except GotError as e:
        click.echo(error(f"Failed to initialize repository: {e}"))
        raise click.Abort()

    click.echo(success(f"Initialized empty Got repository in {repo.got_dir}"))
    click.echo()
    click.echo(info("Repository structure created:"))
    click.echo(info("  .got/objects/     - Object database"))
    click.echo(info("  .got/refs/        - Branch and tag references"))
    click.echo(info("  .got/HEAD         - Current branch pointer"))
    click.echo(info("  .got/config       - Repository configuration"))
