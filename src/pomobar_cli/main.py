"""Main entry point for Pomobar CLI."""

import typer

from pomobar_cli.commands import start_command, version_command

app = typer.Typer(
    name="pomobar",
    help="A terminal Pomodoro timer with a live progress bar",
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context) -> None:
    """Run the timer when no sub-command is given."""
    if ctx.invoked_subcommand is None:
        start_command.start()


app.command("start")(start_command.start)
app.command("version")(version_command.version)


# Main entry point
def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
