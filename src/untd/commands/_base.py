"""Click base class with --examples support and negative positionals.

When ``--examples`` is passed, the command prints usage examples and exits.
This keeps ``--help`` concise while making examples available on demand.
"""

from __future__ import annotations

import re
from typing import Any

import click

_NEGATIVE_NUMBER = re.compile(r"-[0-9]+")


class UntdCommand(click.Command):
    """Click Command subclass with ``--examples`` and ``-123`` positionals.

    Tokens such as ``-86400`` would otherwise be read as unknown short
    options; they are moved behind ``--`` so Click sees them as arguments.
    Option values (``-f -5``) stay in place.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)

    def _value_options(self) -> set[str]:
        names: set[str] = set()
        for param in self.params:
            if isinstance(param, click.Option) and not param.is_flag and not param.count:
                names.update(param.opts)
                names.update(param.secondary_opts)
        return names

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        takes_value = self._value_options()
        options: list[str] = []
        negatives: list[str] = []
        rest: list[str] = []
        expect_value = False
        for i, token in enumerate(args):
            if token == "--":
                rest = args[i + 1 :]
                break
            if expect_value:
                options.append(token)
                expect_value = False
            elif _NEGATIVE_NUMBER.fullmatch(token):
                negatives.append(token)
            else:
                options.append(token)
                expect_value = token in takes_value
        if negatives or rest:
            args = [*options, "--", *negatives, *rest]
        return super().parse_args(ctx, args)
