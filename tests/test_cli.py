from unittest.mock import AsyncMock, patch

from click.testing import CliRunner

from _log_helpers import SENDER, TX_A, dispatch_log, make_message, process_log
from mailboxlogs.cli import cli
from mailboxlogs.core.errors import ConnectivityError
from mailboxlogs.core.models import BlockRange
from mailboxlogs.decoding.specs import EventKind
from mailboxlogs.matching import MatchingList
from mailboxlogs.orchestration.orchestrator import QueryOutput
from mailboxlogs.query.mailbox import MailboxLog


def _output(records, predicate=None) -> QueryOutput:
    return QueryOutput(
        block_range=BlockRange(0, 100),
        chain_id=11155111,
        logs=MailboxLog(records),
        predicate=predicate or MatchingList(),
    )


def _fake_query(output: QueryOutput) -> AsyncMock:
    async def run(config, predicate, on_window=None):
        if on_window is not None:
            on_window(output.block_range, output.chain_id)
        return output

    return AsyncMock(side_effect=run)


def test_query_prints_items() -> None:
    message = make_message(destination=80001)
    records = [dispatch_log(message=message), process_log(origin=43113)]
    runner = CliRunner()

    with patch("mailboxlogs.cli.query", new=_fake_query(_output(records))) as mock_query:
        result = runner.invoke(cli, ["query", "http://node", "--mailbox", "0xabc"])

    assert result.exit_code == 0, result.output
    assert "Querying logs from block 0 to 100." in result.output
    assert "Dispatch in block 10 to: 80001 Mumbai" in result.output
    assert "Process in block 10 from: 43113 Fuji" in result.output
    assert f"Tx hash  : {TX_A}" in result.output
    assert message.id in result.output
    config, predicate = mock_query.await_args.args
    assert config.start_block == -1000
    assert config.end_block == -1
    assert predicate.is_wildcard


def test_query_options_build_config() -> None:
    runner = CliRunner()

    with patch("mailboxlogs.cli.query", new=_fake_query(_output([]))) as mock_query:
        result = runner.invoke(
            cli,
            [
                "query",
                "http://node",
                "--mailbox",
                "0xabc",
                "-s",
                "-50",
                "-e",
                "-2",
                "--kind",
                "dispatch",
                "--match",
                '{"sender_address": "%s"}' % SENDER,
            ],
        )

    assert result.exit_code == 0, result.output
    config, predicate = mock_query.await_args.args
    assert (config.start_block, config.end_block) == (-50, -2)
    assert config.kinds == (EventKind.DISPATCH,)
    assert predicate.items[0].sender_address == [SENDER]


def test_bad_match_json_is_usage_error() -> None:
    result = CliRunner().invoke(cli, ["query", "http://node", "--mailbox", "0xabc", "--match", "{oops"])

    assert result.exit_code == 2


def test_connectivity_error_aborts() -> None:
    failing = AsyncMock(side_effect=ConnectivityError("Failed to retrieve block number", "refused"))

    with patch("mailboxlogs.cli.query", new=failing):
        result = CliRunner().invoke(cli, ["query", "http://node", "--mailbox", "0xabc"])

    assert result.exit_code == 1
    assert "Failed to retrieve block number" in result.output


def test_window_is_announced_before_fetch_failure() -> None:
    async def fail_after_window(config, predicate, on_window=None):
        on_window(BlockRange(0, 100), 11155111)
        raise ConnectivityError("Failed to retrieve logs for blocks 0-100", "timeout")

    with patch("mailboxlogs.cli.query", new=AsyncMock(side_effect=fail_after_window)):
        result = CliRunner().invoke(cli, ["query", "http://node", "--mailbox", "0xabc", "-v"])

    assert result.exit_code == 1
    assert result.output.count("Querying logs from block 0 to 100.") == 1
    assert result.output.index("Querying logs") < result.output.index("Failed to retrieve logs")
