"""
Top-level click group for Philips Hue Lab.

Suggests close sub-command names on a typo, and ends the help text with the
environment variables the global options fall back to.
"""

import os

import click

from core.config import API_KEY_ENV, BRIDGE_ENV, TIMEOUT_ENV
from models.utils import find_similar_strings


class LabGroup(click.Group):
    """Click group with typo suggestions and an environment summary in --help."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            cmd_name = args[0] if args else ''
            if 'No such command' not in str(e) or not cmd_name:
                raise

            visible = [
                name for name in self.list_commands(ctx)
                if not self.get_command(ctx, name).hidden
            ]
            suggestions = find_similar_strings(cmd_name, visible, limit=3)
            if not suggestions:
                raise

            error_msg = f"No such command '{cmd_name}'.\n\n"
            error_msg += click.style("Did you mean one of these?\n", fg='yellow')
            for suggestion in suggestions:
                error_msg += click.style(f"  • {suggestion}\n", fg='green')
            raise click.UsageError(error_msg, ctx)

    def format_epilog(self, ctx, formatter):
        """List the HUE_* variables and whether each one is set."""
        super().format_epilog(ctx, formatter)

        rows = []
        for name in (BRIDGE_ENV, API_KEY_ENV, TIMEOUT_ENV):
            value = os.environ.get(name)
            if not value:
                rows.append((name, click.style('not set', fg='red')))
            elif name == API_KEY_ENV:
                # Never echo the key itself
                rows.append((name, click.style('set', fg='green')))
            else:
                rows.append((name, click.style(value, fg='green')))

        with formatter.section(click.style('Environment', fg='yellow', bold=True)):
            formatter.write_dl(rows)
