"""Root CLI command for guildctl with global flags."""

from __future__ import annotations

import click

from guildctl import __version__
from guildctl.commands._context import AppContext
from guildctl.config.settings import GuildSettings
from guildctl.session.loop import ConsoleIO

_EXAMPLES = """\
  guildctl MTIzNDU2Nzg5.token.value
  guildctl
  guildctl --token-file ~/.config/discord/token.txt
  guildctl -c ~/.config/guildctl/guildctl.toml
  guildctl -v --log-json
  GUILDCTL_API__TIMEOUT=10 guildctl"""


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(_EXAMPLES)
    ctx.exit(0)


@click.command()
@click.version_option(version=__version__, prog_name="guildctl")
@click.option(
    "--examples",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_show_examples,
    help="Show usage examples.",
)
@click.argument("token", required=False)
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.option("-q", "--quiet", is_flag=True, help="Only log warnings and errors.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--token-file",
    default=None,
    help="File to read the token from when TOKEN is omitted (default: token.txt).",
)
def cli(
    token: str | None,
    verbose: bool,
    quiet: bool,
    log_json: bool,
    config_path: str | None,
    token_file: str | None,
) -> None:
    """guildctl — review the guilds a Discord account is in and leave them.

    TOKEN is sent as the Authorization header. When omitted it is read
    from the token file: ``--token-file``, else ``[credentials] file``
    from guildctl.toml (relative to that file), else ``token.txt`` in the
    working directory.
    """
    settings = GuildSettings.from_cli(
        config_path=config_path,
        verbose=verbose,
        quiet=quiet,
        log_json=log_json,
        token_file=token_file,
    )
    app = AppContext(settings)
    try:
        app.authenticate(token)
        app.run_session(ConsoleIO())
    except EOFError:
        raise click.Abort() from None
    finally:
        app.close()
