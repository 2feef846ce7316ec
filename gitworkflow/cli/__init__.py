"""CLI entry point for git-workflow.

This module provides the main CLI application that combines all commands
into a single unified interface. Installed as `git-workflow`, it can also be
run as `git workflow <command>`.
"""

import typer

from gitworkflow.cli.branch import branch_create_command, branch_finish_command
from gitworkflow.cli.init import init_command
from gitworkflow.cli.main import main_command
from gitworkflow.cli.template import (
    template_list_command,
    template_set_command,
    template_unset_command,
)
from gitworkflow.cli.tidy import tidy_command

# Main application
app = typer.Typer(
    name="git-workflow",
    help="git-workflow: branch naming and per-branch commit templates",
    add_completion=False,
    no_args_is_help=True,
)

app.command("init")(init_command)
app.command("branch-create")(branch_create_command)
app.command("branch-finish")(branch_finish_command)
app.command("template-set")(template_set_command)
app.command("template-unset")(template_unset_command)
app.command("template-list")(template_list_command)
app.command("tidy")(tidy_command)

app.callback()(main_command)


__all__ = [
    "app",
    "branch_create_command",
    "branch_finish_command",
    "init_command",
    "main_command",
    "template_list_command",
    "template_set_command",
    "template_unset_command",
    "tidy_command",
]
