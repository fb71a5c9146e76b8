import logging
from typing import Optional, Tuple

import typer
from pydantic_core import PydanticSerializationError

from gitcompare.config import Settings, build_logger
from gitcompare.exceptions import GitCompareError, SSHAuthError
from gitcompare.services import DiffRunner, create_git_manager_from_settings

app = typer.Typer(
    help="Fetch Git repositories and compare commits.",
    add_completion=False,
    no_args_is_help=True,
)


def _setup() -> Tuple[Settings, logging.Logger]:
    settings = Settings()
    return settings, build_logger(settings.log_level_name)


def _fetch(uri: str, target_dir: Optional[str]) -> int:
    settings, logger = _setup()
    manager = create_git_manager_from_settings(settings, logger)
    try:
        manager.clone_repository(uri, target_dir)
    except SSHAuthError as exc:
        logger.critical("Failed to create SSH auth method", exc_info=exc)
        return 1
    except GitCompareError as exc:
        logger.error("Fetch operation failed", exc_info=exc)
        return 1

    logger.info("Fetch operation completed successfully")
    return 0


def _diff(repo: str, first_commit: str, second_commit: Optional[str]) -> int:
    settings, logger = _setup()
    runner = DiffRunner(
        git_manager=create_git_manager_from_settings(settings, logger), logger=logger
    )
    try:
        result = runner.run(repo, first_commit, second_commit)
        output = result.to_json()
    except SSHAuthError as exc:
        logger.critical("Failed to create SSH auth method", exc_info=exc)
        return 1
    except (GitCompareError, PydanticSerializationError) as exc:
        logger.error("Diff operation failed", exc_info=exc)
        return 1

    typer.echo(output)
    logger.info("Diff operation completed successfully")
    return 0


@app.command()
def fetch(
    uri: str = typer.Argument(..., help="Git repository URI (HTTPS or git@ SSH)."),
    target_dir: Optional[str] = typer.Argument(
        None, help="Clone destination. Defaults to the repository name."
    ),
) -> None:
    """Clone a repository, checking out the branch or tag its URL names."""
    raise typer.Exit(code=_fetch(uri, target_dir))


@app.command()
def diff(
    repo: str = typer.Argument(..., help="Repository path or remote URI."),
    first_commit: str = typer.Argument(
        ..., help="First commit: a full or abbreviated SHA-1, or HEAD/latest."
    ),
    second_commit: Optional[str] = typer.Argument(
        None,
        help="Second commit: a SHA-1, or HEAD/latest. Defaults to the latest commit.",
    ),
) -> None:
    """Compare two commits and print the grouped file changes as JSON."""
    raise typer.Exit(code=_diff(repo, first_commit, second_commit))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
