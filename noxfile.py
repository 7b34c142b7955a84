import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]

nox.options.sessions = ["tests"]


def _install(session: nox.Session) -> None:
    """Install the storefront with its test extra into the session virtualenv."""
    session.run("poetry", "install", "--all-extras", external=True)
    # psycopg2 ships a C extension; rebuild it for the session interpreter.
    session.run("pip", "install", "--force-reinstall", "--no-cache-dir", "psycopg2-binary")


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def domain(session: nox.Session) -> None:
    """Aggregate and value-object tests only."""
    _install(session)
    session.run("pytest", "-m", "domain", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def api(session: nox.Session) -> None:
    """HTTP tests through the FastAPI test client."""
    _install(session)
    session.run("pytest", "-m", "integration", *session.posargs)

