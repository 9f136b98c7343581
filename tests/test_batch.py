import pytest

from ipprefix.config import PrefixConfig, set_config
from ipprefix.logging_config import get_error_stats
from ipprefix.prefix.batch import apply_rows
from ipprefix.prefix.core import format_prefix, make_prefix, subnet_max
from ipprefix.prefix.errors import ErrorKind


ROWS = ["10.1.2.3/8", "10.0.0.0", "300.1.1.1/8", "10.0.0.0/abc", "10.0.0.0/40", "::/0"]


def test_failures_are_isolated_per_row():
    outcomes = apply_rows(make_prefix, ROWS)
    assert [o.index for o in outcomes] == list(range(len(ROWS)))
    assert [o.error_kind for o in outcomes] == [
        None,
        ErrorKind.MISSING_SLASH,
        ErrorKind.INVALID_ADDRESS,
        ErrorKind.INVALID_MASK,
        ErrorKind.MASK_EXCEEDS_WIDTH,
        None,
    ]
    assert format_prefix(outcomes[0].value) == "10.0.0.0/8"
    assert format_prefix(outcomes[-1].value) == "::/0"


def test_detailed_outcomes_carry_messages():
    outcomes = apply_rows(make_prefix, ["10.0.0.0/40"], detailed=True)
    assert not outcomes[0].ok
    assert outcomes[0].message == "CIDR value '40' is > network bit count '32'"


def test_suppressed_outcomes_carry_kind_only():
    outcomes = apply_rows(make_prefix, ROWS, detailed=False)
    failed = [o for o in outcomes if not o.ok]
    assert len(failed) == 4
    assert all(o.message is None and o.error_kind is not None for o in failed)


def test_mode_defaults_to_config():
    set_config(PrefixConfig(skip_error_details=True))
    outcomes = apply_rows(make_prefix, ["nope"])
    assert outcomes[0].error_kind == ErrorKind.MISSING_SLASH
    assert outcomes[0].message is None


def test_tuple_rows_are_unpacked():
    outcomes = apply_rows(make_prefix, [("192.168.1.5", 24), ("10.0.0.0", 33)])
    assert str(outcomes[0].value) == "192.168.1.0/24"
    assert outcomes[1].error_kind == ErrorKind.MASK_EXCEEDS_WIDTH


def test_composed_operations():
    outcomes = apply_rows(lambda text: str(subnet_max(make_prefix(text))), ["10.0.0.0/8", "bad/8"])
    assert outcomes[0].value == "10.255.255.255"
    assert outcomes[1].error_kind == ErrorKind.INVALID_ADDRESS


def test_failures_are_counted_by_kind():
    apply_rows(make_prefix, ROWS)
    stats = get_error_stats()
    assert stats == {
        "missing_slash": 1,
        "invalid_address": 1,
        "invalid_mask": 1,
        "mask_exceeds_width": 1,
    }


def test_programming_errors_propagate():
    with pytest.raises(TypeError):
        apply_rows(make_prefix, [b"10.0.0.0/8"])


def test_zero_padded_mask_rows_do_not_abort_batch():
    padded = "0" * 5000
    outcomes = apply_rows(
        make_prefix,
        ["10.0.0.0/" + padded + "999", "10.1.2.3/" + padded + "8", "10.0.0.0/8"],
    )
    assert len(outcomes) == 3
    assert outcomes[0].error_kind == ErrorKind.INVALID_MASK
    assert format_prefix(outcomes[1].value) == "10.0.0.0/8"
    assert format_prefix(outcomes[2].value) == "10.0.0.0/8"
