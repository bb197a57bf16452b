import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13", "3.14"]


def _install(session: nox.Session) -> None:
    """Install the project with its test extra into the nox virtualenv."""
    session.run(
        "poetry",
        "install",
        "--extras",
        "test",
        external=True,
    )


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run full test suite across Python versions."""
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS)
def tests_domain(session: nox.Session) -> None:
    """Run domain-layer tests only (no provider or HTTP stack involved)."""
    _install(session)
    session.run("pytest", "tests/shops/domain/", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1], default=False)
def tests_production_config(session: nox.Session) -> None:
    """Run the suite against the production overlay (SQLite provider)."""
    _install(session)
    session.run("python", "src/manage.py", "setup-db", env={"PROTEAN_ENV": "production"})
    session.run("pytest", "--env", "production", *session.posargs)
