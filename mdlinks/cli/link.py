"""Link Typer app factory."""

import typer

from mdlinks.api.link.cmd_check import cmd_check
from mdlinks.api.link.cmd_normalize import cmd_normalize
from mdlinks.api.link.cmd_show import cmd_show
from mdlinks.api.link.cmd_style import cmd_style
from mdlinks.api.link.cmd_substitute import cmd_substitute
from mdlinks.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    """Create and configure the link Typer app."""
    app = typer.Typer(
        name="link",
        help="Inspect and rewrite markdown links",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd(
        path: str = typer.Argument(..., help="Markdown file to read"),
    ) -> None:
        """List the links of a markdown file."""
        _handle_stage_result(cmd_show)(path=path)

    @app.command(name="check")
    def check_cmd(
        path: str = typer.Argument(..., help="Markdown file or directory to check"),
        fix: bool = typer.Option(False, "--fix", help="Write repaired links back"),
        dataset_root: str | None = typer.Option(None, "--dataset-root", help="Override configured dataset root"),
    ) -> None:
        """Report links whose target does not exist."""
        _handle_stage_result(cmd_check)(path=path, fix=fix, dataset_root=dataset_root)

    @app.command(name="normalize")
    def normalize_cmd(
        path: str = typer.Argument(..., help="Markdown file or directory to normalize"),
        dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Report changes without writing"),
        dataset_root: str | None = typer.Option(None, "--dataset-root", help="Override configured dataset root"),
    ) -> None:
        """Rewrite links to their canonical relative form."""
        _handle_stage_result(cmd_normalize)(path=path, dry_run=dry_run, dataset_root=dataset_root)

    @app.command(name="substitute")
    def substitute_cmd(
        path: str = typer.Argument(..., help="Markdown file or directory to rewrite"),
        old_base: str = typer.Argument(..., help="Link prefix to replace"),
        new_base: str = typer.Argument(..., help="Replacement prefix"),
        dry_run: bool = typer.Option(False, "--dry-run", "-n", help="Report changes without writing"),
    ) -> None:
        """Replace a path prefix in every local link."""
        _handle_stage_result(cmd_substitute)(path=path, old_base=old_base, new_base=new_base, dry_run=dry_run)

    @app.command(name="style")
    def style_cmd(
        path: str = typer.Argument(..., help="Directory to scan"),
    ) -> None:
        """Detect whether links are mostly relative or absolute."""
        _handle_stage_result(cmd_style)(path=path)

    return app
