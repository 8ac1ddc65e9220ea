"""Click group with command aliases."""

from typing import Any, Callable, Iterable

import click


class AliasedGroup(click.Group):
    """Group that also resolves subcommands by short alias.

    Aliases are registered alongside the command and stay out of the help
    listing.
    """

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.aliases: dict[str, str] = {}

    def add_command(
        self,
        cmd: click.Command,
        name: str | None = None,
        aliases: Iterable[str] = (),
    ) -> None:
        super().add_command(cmd, name)
        for alias in aliases:
            self.aliases[alias] = name or cmd.name  # type: ignore[assignment]

    def command(self, *args: Any, aliases: Iterable[str] = (), **kwargs: Any) -> Callable[..., click.Command]:  # type: ignore[override]
        decorator = super().command(*args, **kwargs)

        def wrapper(f: Callable[..., Any]) -> click.Command:
            cmd = decorator(f)
            for alias in aliases:
                self.aliases[alias] = cmd.name  # type: ignore[assignment]
            return cmd

        return wrapper

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        _, cmd, args = super().resolve_command(ctx, args)
        return (cmd.name if cmd else None), cmd, args
