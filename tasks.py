from invoke import task
from pathlib import Path

# Get project root directory
PROJECT_ROOT = Path(__file__).parent.absolute()


def project_relative(path):
    """Convert a relative path to an absolute path relative to the project root."""
    return str(PROJECT_ROOT / path)


@task
def update(c):
    """Update all dependencies to their latest versions using poetry."""
    c.run("poetry update")


@task
def up(c):
    """Alias for update - update all dependencies to their latest versions."""
    update(c)


@task
def shell(c):
    """Start Django shell."""
    manage_py = project_relative("manage.py")
    c.run(f"python {manage_py} shell")


@task
def test(c, path=None):
    """Run Django tests. Optionally specify a specific test path."""
    manage_py = project_relative("manage.py")
    with c.prefix("export DJANGO_SETTINGS_MODULE=golfscore.test_settings"):
        if path:
            c.run(f"python {manage_py} test {path}")
        else:
            c.run(f"python {manage_py} test golfscore")


@task
def leaderboard(c, game_file, format=None, detail=None):
    """Print the leaderboard for a game JSON file."""
    manage_py = project_relative("manage.py")
    command = f"python {manage_py} compute_leaderboard {game_file}"
    if format:
        command += f' --format "{format}"'
    if detail:
        command += f" --detail {detail}"
    c.run(command)


@task
def lb(c, game_file, format=None, detail=None):
    """Alias for leaderboard."""
    leaderboard(c, game_file, format, detail)
