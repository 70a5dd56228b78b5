"""seqdfa command line interface.

Commands:
- search: report each occurrence of a literal pattern in files
- count: count occurrences per file
- table: dump the pattern's transition table
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from seqdfa import __version__
from seqdfa.automaton import DFA
from seqdfa.config import MatcherConfig
from seqdfa.patterns import DFAPatternMatcher
from seqdfa.types.errors import InputReadError, SeqDFAError
from seqdfa.utils.logger import configure_logging, logger


def _read_text(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise InputReadError(f"Failed to read {path}: {e}", file_path=path, original_error=e) from e


def _build_matcher(ctx: click.Context, pattern: str, **overrides) -> DFAPatternMatcher:
    base: MatcherConfig = ctx.obj["config"]
    values = {
        "context_lines": base.context_lines,
        "max_content_size": base.max_content_size,
        "max_matches": base.max_matches,
        "ignore_case": base.ignore_case,
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return DFAPatternMatcher(pattern, config=MatcherConfig(**values))


class SeqDFAGroup(click.Group):
    """Click group that reports SeqDFAError as a clean CLI failure."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except SeqDFAError as e:
            logger.debug(f"Command failed: {e!r}")
            raise click.ClickException(e.get_formatted_message()) from e


@click.group(cls=SeqDFAGroup, invoke_without_command=True)
@click.version_option(__version__, prog_name="seqdfa", message="%(prog)s v%(version)s")
@click.option("--debug", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """seqdfa - Single-pass fixed-pattern search with a DFA."""
    configure_logging(True if debug else None)
    ctx.ensure_object(dict)
    if "config" not in ctx.obj:
        ctx.obj["config"] = MatcherConfig.from_env()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("pattern")
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option("-i", "--ignore-case", is_flag=True, help="Case-insensitive matching.")
@click.option("-C", "--context", "context_lines", type=int, default=None, help="Context lines to include.")
@click.option("--limit", type=click.IntRange(min=1), default=100, show_default=True, help="Maximum matches to report.")
@click.option("--json", "as_json", is_flag=True, help="Emit matches as JSON.")
@click.pass_context
def search(
    ctx: click.Context,
    pattern: str,
    files: tuple[str, ...],
    ignore_case: bool,
    context_lines: int | None,
    limit: int,
    as_json: bool,
) -> None:
    """Find PATTERN in each of FILES."""
    matcher = _build_matcher(ctx, pattern, ignore_case=ignore_case or None, context_lines=context_lines)
    contents = [(path, _read_text(path)) for path in files]
    matches = matcher.match_in_files(contents, limit=limit)

    if as_json:
        click.echo(json.dumps([m.to_dict() for m in matches], indent=2))
        return

    for m in matches:
        click.echo(f"{m.file_path}:{m.line_start}:{m.column_start}: {m.matched_text}")
    if not matches:
        click.echo("No matches found.", err=True)
        ctx.exit(1)


@cli.command()
@click.argument("pattern")
@click.argument("files", nargs=-1, required=True, type=click.Path(dir_okay=False))
@click.option("-i", "--ignore-case", is_flag=True, help="Case-insensitive matching.")
@click.pass_context
def count(ctx: click.Context, pattern: str, files: tuple[str, ...], ignore_case: bool) -> None:
    """Count occurrences of PATTERN in each of FILES."""
    matcher = _build_matcher(ctx, pattern, ignore_case=ignore_case or None)
    total = 0
    for path in files:
        n = matcher.count(_read_text(path))
        total += n
        click.echo(f"{path}: {n}")
    if len(files) > 1:
        click.echo(f"total: {total}")


@cli.command()
@click.argument("pattern")
@click.option("--json", "as_json", is_flag=True, help="Emit the table as JSON.")
def table(pattern: str, as_json: bool) -> None:
    """Show the transition table compiled from PATTERN."""
    dfa: DFA[str] = DFA(pattern)
    nodes = [dfa.transitions(state) for state in range(dfa.final_state)]

    if as_json:
        click.echo(
            json.dumps(
                {"final_state": dfa.final_state, "states": nodes},
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    for state, node in enumerate(nodes):
        edges = ", ".join(f"{key!r}->{target}" for key, target in sorted(node.items()))
        click.echo(f"{state}: {edges or '(empty)'}")
    click.echo(f"final: {dfa.final_state}")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
