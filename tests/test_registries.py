import pytest

from mailboxlogs.decoding.registry import MAILBOX_REGISTRY, kind_for_topic0, spec_for_kind
from mailboxlogs.decoding.registry_builder import event_spec_from_signature, make_registry
from mailboxlogs.decoding.specs import MAILBOX_KINDS, TOPIC_LAYOUTS, EventKind


def test_registry_covers_every_kind() -> None:
    assert len(MAILBOX_REGISTRY) == len(EventKind)
    for kind in EventKind:
        spec = spec_for_kind(kind)
        assert kind_for_topic0(spec.topic0) is kind
        assert kind_for_topic0(spec.topic0.upper().replace("0X", "0x")) is kind


def test_unknown_topic0() -> None:
    assert kind_for_topic0("0x" + "00" * 32) is None


def test_mailbox_kinds_exclude_gas_payment() -> None:
    assert EventKind.GAS_PAYMENT not in MAILBOX_KINDS
    assert len(MAILBOX_KINDS) == 4


def test_spec_fields_from_signature() -> None:
    spec = event_spec_from_signature(EventKind.DISPATCH.signature)

    assert spec.name == "Dispatch"
    assert [(f.name, f.index, f.type) for f in spec.topic_fields] == [
        ("sender", 1, "address"),
        ("destination", 2, "uint32"),
        ("recipient", 3, "bytes32"),
    ]
    assert [(f.name, f.word_index, f.type) for f in spec.data_fields] == [("message", 0, "bytes")]
    assert spec.topic_count == 4


@pytest.mark.parametrize("kind", list(TOPIC_LAYOUTS))
def test_topic_layout_agrees_with_signature(kind: EventKind) -> None:
    layout = TOPIC_LAYOUTS[kind]
    by_name = {f.name: f.index for f in spec_for_kind(kind).topic_fields}
    domain_name = "origin" if layout.domain_role == "origin" else "destination"

    assert by_name["sender"] == layout.sender
    assert by_name["recipient"] == layout.recipient
    assert by_name[domain_name] == layout.domain


def test_unnamed_params_and_single_signature() -> None:
    reg = make_registry("Ping(uint256 indexed, bytes32)")
    (spec,) = reg.values()

    assert spec.topic_fields[0].name == "arg0"
    assert spec.data_fields[0].name == "arg1"


def test_invalid_signature() -> None:
    with pytest.raises(ValueError):
        event_spec_from_signature("NotASignature")
