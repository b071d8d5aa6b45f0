import pytest

from _log_helpers import RECIPIENT, SENDER
from mailboxlogs.matching import MatchingList, MatchItem


def _match(predicate, origin=None, destination=None, sender=None, recipient=None) -> bool:
    return predicate.matches(
        origin_domain=origin,
        destination_domain=destination,
        sender=sender,
        recipient=recipient,
    )


def test_empty_list_is_wildcard() -> None:
    assert MatchingList().is_wildcard
    assert MatchingList(items=[]).is_wildcard
    assert _match(MatchingList())


def test_item_with_all_wildcards_makes_list_wildcard() -> None:
    predicate = MatchingList(items=[MatchItem(origin_domain=[1]), MatchItem()])

    assert predicate.is_wildcard
    assert _match(predicate, origin=2)


def test_from_json_single_object_with_scalars() -> None:
    predicate = MatchingList.from_json(
        '{"origin_domain": [11155111, 80001], "sender_address": "%s", "destination_domain": 80001}' % SENDER.upper().replace("0X", "0x")
    )

    assert not predicate.is_wildcard
    assert predicate.items[0].destination_domain == [80001]
    assert predicate.items[0].sender_address == [SENDER]
    assert _match(predicate, origin=80001, destination=80001, sender=SENDER, recipient=RECIPIENT)
    assert not _match(predicate, origin=1, destination=80001, sender=SENDER)


def test_from_json_list_is_any_of() -> None:
    predicate = MatchingList.from_json('[{"origin_domain": 1}, {"destination_domain": 2}]')

    assert _match(predicate, origin=1)
    assert _match(predicate, destination=2)
    assert not _match(predicate, origin=3, destination=3)


def test_address_match_is_case_insensitive() -> None:
    predicate = MatchingList(items=[MatchItem(recipient_address=[RECIPIENT.upper()])])

    assert _match(predicate, recipient=RECIPIENT)


def test_absent_value_only_matches_wildcard() -> None:
    predicate = MatchingList(items=[MatchItem(sender_address=[SENDER])])

    assert not _match(predicate, sender=None)


def test_star_is_wildcard() -> None:
    item = MatchItem.model_validate({"origin_domain": "*", "destination_domain": 5})

    assert item.origin_domain is None
    assert item.destination_domain == [5]


def test_enumerated() -> None:
    predicate = MatchingList(items=[MatchItem(origin_domain=[1, 2]), MatchItem(origin_domain=[2, 3])])

    assert predicate.enumerated("origin_domain") == [1, 2, 3]
    assert predicate.enumerated("sender_address") is None


def test_invalid_json_raises_value_error() -> None:
    with pytest.raises(ValueError):
        MatchingList.from_json('{"origin_domain": "not-a-number"}')
