import logging
from pathlib import Path
from typing import Callable

import click
from rich.console import Console
from rich.logging import RichHandler

from buckets.checker import check_bucket
from buckets.constants import (
    APP_NAME,
    APP_VERSION,
    BUCKET_DIR_ENVVAR,
    BUCKET_DIRNAME,
)
from buckets.errors import BucketAppError
from buckets.lifecycle import create_bucket, load_bucket_config, rename_bucket
from buckets.repository import init_repository, read_repository_info
from buckets.rules.models import Rule, new_rule
from buckets.rules.repository import RuleStore
from buckets.tui import BucketConsoleUI


logger = logging.getLogger(__name__)


def _bucket_option() -> Callable:
    return click.option(
        "--bucket",
        "bucket_root",
        type=click.Path(path_type=Path, file_okay=False),
        envvar=BUCKET_DIR_ENVVAR,
        default=".",
        show_default=True,
        help="Bucket root directory.",
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _bucket_display_name(bucket_root: Path) -> str:
    # config.yaml only supplies the display name; check never depends on it
    try:
        return load_bucket_config(bucket_root).name
    except BucketAppError as exc:
        logger.warning("%s", exc)
        return bucket_root.resolve().name


def _save_rule(rule: Rule, bucket_root: Path, absent: bool) -> None:
    if absent:
        rule.mark_not_exists()
    ui = BucketConsoleUI(Console())
    store = RuleStore(bucket_root / BUCKET_DIRNAME)
    try:
        path = store.save(rule)
    except BucketAppError as exc:
        raise click.ClickException(str(exc))
    ui.render_rule_saved(rule, path)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Declare and check expectations about bucket contents."""
    _configure_logging(verbose)


@cli.command(help="Display the version of the bucket tool.")
def version() -> None:
    click.echo(f"{APP_NAME} version {APP_VERSION}")


@cli.command(help="Initialize a new bucket repository in a directory named NAME.")
@click.argument("name")
def init(name: str) -> None:
    ui = BucketConsoleUI(Console())
    try:
        repo_root = init_repository(Path.cwd(), name)
    except BucketAppError as exc:
        raise click.ClickException(str(exc))
    ui.render_repository_created(name, repo_root)


@cli.command(help="Create a new bucket for content.")
@click.argument("name")
def create(name: str) -> None:
    ui = BucketConsoleUI(Console())
    try:
        config = create_bucket(Path.cwd(), name)
    except BucketAppError as exc:
        raise click.ClickException(str(exc))
    ui.render_bucket_saved(config.name, config.root)


@cli.command(help="Rename an existing bucket.")
@click.argument("old_name")
@click.argument("new_name")
def rename(old_name: str, new_name: str) -> None:
    ui = BucketConsoleUI(Console())
    try:
        config = rename_bucket(Path.cwd(), old_name, new_name)
    except BucketAppError as exc:
        raise click.ClickException(str(exc))
    ui.render_bucket_saved(config.name, config.root, renamed_from=old_name)


@cli.command(help="Get information about the repository.")
def info() -> None:
    ui = BucketConsoleUI(Console())
    try:
        root, content = read_repository_info(Path.cwd())
    except BucketAppError as exc:
        raise click.ClickException(str(exc))
    ui.render_info(root, content)


@cli.command(
    help="Declare what the bucket should expect.\n\n"
    "Example: 'bucket expect bucket Flower' expects a bucket named Flower."
)
@click.argument("kind")
@click.argument("name")
@click.option("--absent", is_flag=True, help="Expect the target not to exist.")
@_bucket_option()
def expect(kind: str, name: str, absent: bool, bucket_root: Path) -> None:
    _save_rule(new_rule(kind, name), bucket_root, absent)


@cli.command("set", help="Pick the resource type interactively, then expect NAME.")
@click.argument("name")
@click.option("--absent", is_flag=True, help="Expect the target not to exist.")
@_bucket_option()
def set_expectation(name: str, absent: bool, bucket_root: Path) -> None:
    from buckets.tui.kind_selector import select_kind

    kind = select_kind(name)
    if kind is None:
        BucketConsoleUI(Console()).render_cancelled("set")
        return
    _save_rule(new_rule(kind, name), bucket_root, absent)


@cli.command(help="Check all expectations of a bucket.")
@_bucket_option()
def check(bucket_root: Path) -> None:
    ui = BucketConsoleUI(Console())
    diagnostics: list[str] = []
    try:
        verdict = check_bucket(bucket_root, report=diagnostics.append)
    except BucketAppError as exc:
        raise click.ClickException(f"Fatal: {exc}")

    ui.render_check(verdict, bucket=_bucket_display_name(bucket_root), diagnostics=diagnostics)

    if not verdict.ok:
        raise click.exceptions.Exit(1)


def main() -> int:
    try:
        # non-standalone click returns the code of a raised Exit
        code = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.exceptions.Abort:
        return 1
    except click.ClickException as exc:
        exc.show()
        return 2
    return code if isinstance(code, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
