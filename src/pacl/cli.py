import shlex

import click

from pacl.config import HomeDirectoryError, get_destination, get_pacl_root
from pacl.constants import PACL_SSH_ENV_VAR
from pacl.git import GitError, build_clone_command, clone_repo, is_cloned
from pacl.url import ParseError, normalize_repo_url


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("repo")
@click.argument("extra_args", nargs=-1, type=click.UNPROCESSED)
@click.option(
    "--base-dir",
    "-b",
    "base_dir",
    default=None,
    metavar="DIR",
    help="Base directory to clone into (default: $PACL_ROOT or ~/pacl).",
)
@click.option(
    "--ssh",
    "-s",
    "prefer_ssh",
    is_flag=True,
    envvar=PACL_SSH_ENV_VAR,
    help="Expand owner/name shorthand to an SSH locator instead of HTTPS.",
)
@click.option(
    "--dry-run", "-n", is_flag=True, help="Show what would be cloned and exit."
)
@click.option(
    "--print-path",
    "-p",
    is_flag=True,
    help="Print the destination directory and exit.",
)
def main(
    repo: str,
    extra_args: tuple[str, ...],
    base_dir: str | None = None,
    prefer_ssh: bool = False,
    dry_run: bool = False,
    print_path: bool = False,
) -> None:
    """Clone a repository into a directory derived from its URL.

    Arguments after REPO are passed to git clone; put them after `--`.

    \b
    Examples:
        pacl octocat/Spoon-Knife
        pacl --ssh octocat/Spoon-Knife
        pacl git@gitlab.com:group/project.git -- --depth 1
    """
    locator = normalize_repo_url(repo, prefer_ssh=prefer_ssh)
    try:
        destination = get_destination(get_pacl_root(base_dir), locator)
    except (ParseError, HomeDirectoryError) as exc:
        raise click.ClickException(str(exc)) from exc

    if print_path:
        click.echo(str(destination))
        return

    if dry_run:
        cmd = build_clone_command(locator, destination, extra_args)
        click.echo(f"  Repo: {click.style(locator, fg='cyan')}")
        click.echo(f"  Path: {click.style(str(destination), fg='blue')}")
        click.echo(f"  Cmd:  {shlex.join(cmd)}")
        return

    if is_cloned(destination):
        click.secho("Repository already cloned.", fg="yellow", err=True)
        click.echo(f"  Path: {click.style(str(destination), fg='blue')}")
        return

    try:
        clone_repo(locator, destination, extra_args)
    except GitError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        code = exc.returncode if exc.returncode and exc.returncode > 0 else 1
        raise SystemExit(code) from exc

    click.secho(f"Cloned into {destination}", fg="green", bold=True)


if __name__ == "__main__":
    main()
