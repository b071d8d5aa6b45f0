import asyncio
import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from mailboxlogs.core.config import QueryConfig
from mailboxlogs.core.domains import describe_domain
from mailboxlogs.core.errors import MailboxLogsError
from mailboxlogs.core.models import BlockRange
from mailboxlogs.decoding.specs import MAILBOX_KINDS, EventKind
from mailboxlogs.matching import MatchingList
from mailboxlogs.orchestration.orchestrator import query
from mailboxlogs.presentation import format_log_item

console = Console()

_KIND_CHOICES = {k.value.lower(): k for k in EventKind}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@click.group()
def cli() -> None:
    """mailbox-logs — query cross-chain mailbox message logs."""


@cli.command("query")
@click.argument("rpc_url")
@click.option("--mailbox", required=True, help="Mailbox contract address")
@click.option(
    "--start-block",
    "-s",
    type=int,
    default=-1000,
    show_default=True,
    help="First block; negative (-n) means head + 1 - n",
)
@click.option(
    "--end-block",
    "-e",
    type=int,
    default=-1,
    show_default=True,
    help="Last block; negative (-n) means head + 1 - n",
)
@click.option(
    "--kind",
    "kinds",
    multiple=True,
    type=click.Choice(sorted(_KIND_CHOICES), case_sensitive=False),
    help="Event kind to fetch; repeat to OR (default: all mailbox events)",
)
@click.option("--match", "match_json", type=str, default="", help="JSON match item or list of items")
@click.option("--verbose", "-v", is_flag=True, help="Show raw logs and debug output")
def query_cmd(
    rpc_url: str,
    mailbox: str,
    start_block: int,
    end_block: int,
    kinds: tuple[str, ...],
    match_json: str,
    verbose: bool,
) -> None:
    """Query Dispatch/Process logs of a mailbox contract over a block window."""
    _setup_logging(verbose)

    try:
        predicate = MatchingList.from_json(match_json) if match_json.strip() else MatchingList()
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--match") from e

    config = QueryConfig(
        rpc_url=rpc_url,
        mailbox_address=mailbox,
        start_block=start_block,
        end_block=end_block,
        kinds=tuple(_KIND_CHOICES[k.lower()] for k in kinds) or MAILBOX_KINDS,
        verbose=verbose,
    )

    def announce(block_range: BlockRange, chain_id: int) -> None:
        console.print(describe_domain("Origin", chain_id), markup=False)
        console.print(f"Querying logs from block {block_range.start} to {block_range.end}.", markup=False)

    console.print(f"Connecting to: {rpc_url}", markup=False, highlight=False)
    try:
        output = asyncio.run(query(config, predicate, on_window=announce))
        for item in output.items():
            console.print()
            for line in format_log_item(item, verbose=config.verbose):
                console.print(line, markup=False, highlight=False)
    except MailboxLogsError as e:
        raise click.ClickException(str(e)) from e


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
