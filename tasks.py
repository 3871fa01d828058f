from invoke import task
from pathlib import Path

# Get project root directory
PROJECT_ROOT = Path(__file__).parent.absolute()


def project_relative(path):
    """Convert a relative path to an absolute path relative to the project root."""
    return str(PROJECT_ROOT / path)


@task
def install(c):
    """Install the project in editable mode with the test extras."""
    c.run(f"pip install -e '{PROJECT_ROOT}[test]'")


@task
def status(c):
    """Check git status of the repository."""
    c.run("git status")


@task
def st(c):
    """Alias for status - check git status of the repository."""
    status(c)


@task
def test(c, path=None, verbose=False):
    """Run the rules engine tests. Optionally specify a specific test module."""
    flags = "-v" if verbose else ""
    if path:
        c.run(f"python -m unittest {flags} {path}")
    else:
        start_dir = project_relative("oche")
        c.run(f"python -m unittest discover {flags} -s {start_dir} -t {PROJECT_ROOT}")
