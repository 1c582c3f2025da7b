"""Integration tests for the hash-object command."""

import pytest
from click.testing import CliRunner
from got.cli.main import cli

HELLO_HASH = 'ce013625030ba8dba906f756967f9e9ca394464a'


@pytest.fixture
def hello_file(temp_dir):
    """File containing 'hello\\n'."""
    path = temp_dir / 'hello.txt'
    path.write_bytes(b'hello\n')
    return path


def test_hash_only(hello_file, temp_dir, monkeypatch):
    """Test hashing outside any repository works without -w."""
    monkeypatch.chdir(temp_dir)
    result = CliRunner().invoke(cli, ['hash-object', str(hello_file)])

    assert result.exit_code == 0
    assert result.output.strip() == HELLO_HASH
    assert not (temp_dir / '.got').exists()


def test_hash_only_does_not_write(repo, monkeypatch):
    """Test hashing inside a repository without -w stores nothing."""
    path = repo.work_tree / 'hello.txt'
    path.write_bytes(b'hello\n')
    monkeypatch.chdir(repo.work_tree)

    result = CliRunner().invoke(cli, ['hash-object', 'hello.txt'])

    assert result.exit_code == 0
    assert result.output.strip() == HELLO_HASH
    assert not repo.objects.exists(HELLO_HASH)


def test_hash_and_write(repo, monkeypatch):
    """Test -w stores the object in the enclosing repository."""
    subdir = repo.work_tree / 'docs'
    subdir.mkdir()
    (subdir / 'hello.txt').write_bytes(b'hello\n')
    monkeypatch.chdir(subdir)

    result = CliRunner().invoke(cli, ['hash-object', '-w', 'hello.txt'])

    assert result.exit_code == 0
    assert result.output.strip() == HELLO_HASH
    assert repo.objects.read(HELLO_HASH, 'blob') == b'hello\n'


def test_write_outside_repository_fails(hello_file, temp_dir, monkeypatch):
    """Test -w without a repository reports an error."""
    monkeypatch.chdir(temp_dir)
    result = CliRunner().invoke(cli, ['hash-object', '--write', str(hello_file)])

    assert result.exit_code == 1
    assert 'Could not find a got repository' in result.output


def test_unknown_type_rejected(hello_file):
    """Test -t only accepts registered kinds."""
    result = CliRunner().invoke(cli, ['hash-object', '-t', 'commit', str(hello_file)])
    assert result.exit_code == 2


def test_missing_file(temp_dir):
    """Test a nonexistent FILE is a usage error."""
    result = CliRunner().invoke(cli, ['hash-object', str(temp_dir / 'nope.txt')])
    assert result.exit_code == 2
