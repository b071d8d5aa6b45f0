from _log_helpers import RECIPIENT, SENDER, topic0
from mailboxlogs.decoding.specs import MAILBOX_KINDS, EventKind
from mailboxlogs.matching import MatchingList, MatchItem
from mailboxlogs.orchestration.utils import address_topic, build_topic_filter, uint_topic


def test_uint_and_address_topics() -> None:
    assert uint_topic(1) == "0x" + "00" * 31 + "01"
    assert address_topic(SENDER.upper().replace("0X", "0x")) == "0x" + "00" * 12 + SENDER[2:]


def test_multiple_kinds_only_filter_topic0() -> None:
    predicate = MatchingList(items=[MatchItem(destination_domain=[80001], sender_address=[SENDER])])

    assert build_topic_filter(MAILBOX_KINDS, predicate) == [[topic0(k) for k in MAILBOX_KINDS]]


def test_wildcard_predicate_only_filters_topic0() -> None:
    assert build_topic_filter((EventKind.DISPATCH,), MatchingList()) == [[topic0(EventKind.DISPATCH)]]


def test_dispatch_slots() -> None:
    predicate = MatchingList(
        items=[MatchItem(destination_domain=[80001], sender_address=[SENDER], recipient_address=[RECIPIENT])]
    )

    assert build_topic_filter((EventKind.DISPATCH,), predicate) == [
        [topic0(EventKind.DISPATCH)],
        [address_topic(SENDER)],
        [uint_topic(80001)],
        [address_topic(RECIPIENT)],
    ]


def test_process_slots_put_origin_first() -> None:
    predicate = MatchingList(items=[MatchItem(origin_domain=[43113, 5])])

    assert build_topic_filter((EventKind.PROCESS,), predicate) == [
        [topic0(EventKind.PROCESS)],
        [uint_topic(43113), uint_topic(5)],
    ]


def test_open_field_in_any_item_leaves_slot_open() -> None:
    predicate = MatchingList(
        items=[MatchItem(sender_address=[SENDER], recipient_address=[RECIPIENT]), MatchItem(recipient_address=[RECIPIENT])]
    )

    assert build_topic_filter((EventKind.PROCESS,), predicate) == [
        [topic0(EventKind.PROCESS)],
        None,
        None,
        [address_topic(RECIPIENT)],
    ]


def test_kind_without_layout_only_filters_topic0() -> None:
    predicate = MatchingList(items=[MatchItem(origin_domain=[1])])

    assert build_topic_filter((EventKind.DISPATCH_ID,), predicate) == [[topic0(EventKind.DISPATCH_ID)]]
