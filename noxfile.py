"""Nox sessions."""
import nox
from nox.sessions import Session

nox.options.sessions = "lint", "test"
locations = "src", "tests", "noxfile.py"


@nox.session
def test(session: Session) -> None:
    """Test with pytest."""
    args = session.posargs or ["--doctest-modules", "src", "tests"]
    session.install("-e", ".[dev]")
    session.run("pytest", *args)


@nox.session
def lint(session: Session) -> None:
    """Lint with flake8."""
    args = session.posargs or locations
    session.install("flake8")
    session.run("flake8", *args)


@nox.session
def format(session: Session) -> None:
    """Format with black."""
    args = session.posargs or locations
    session.install("black")
    session.run("black", *args)


@nox.session
def docs(session: Session) -> None:
    """Build the documentation with sphinx."""
    session.install("-e", ".[dev]")
    session.run("sphinx-build", "docs", "docs/_build")
