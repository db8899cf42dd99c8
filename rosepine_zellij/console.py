"""Status lines printed while installing."""

import click


def ok(message: str) -> None:
    click.echo(f" [  {click.style('OK', fg='green')}  ]  {message}")


def fail(message: str) -> None:
    click.echo(f" [ {click.style('FAIL', fg='red')} ]  {message}")


def info(message: str) -> None:
    click.echo(f" [ {click.style('INFO', fg='bright_blue')} ]  {message}")


def sublog(message: str, depth: int = 1) -> None:
    click.echo(" " * 10 + " " * (2 * depth) + " " + message)


def highlight(text: str, bold: bool = False) -> str:
    return click.style(text, fg="yellow", bold=bold)


def dim(text: str) -> str:
    return click.style(text, fg="bright_black")
