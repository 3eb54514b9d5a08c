"""
Property-based tests for the Replay SDK.

These tests verify that properties hold true across many random inputs.
"""
from hypothesis import given, strategies as st, settings, HealthCheck

from replay_sdk.client import calc_replay_address
from replay_sdk.derivation import find_program_address, is_on_curve
from replay_sdk.ecosystems import classify
from replay_sdk.models import Ecosystem
from replay_sdk.utils import decode_pubkey
from conftest import TEST_RECEIPT_PROGRAM

RECEIPT_PROGRAM = decode_pubkey(TEST_RECEIPT_PROGRAM)

# Seed sets within the runtime limits (bump included)
seeds_strategy = st.lists(st.binary(max_size=32), max_size=15)
program_strategy = st.binary(min_size=32, max_size=32)
preimage_strategy = st.binary(min_size=1, max_size=128)
hex_strategy = st.text(alphabet="0123456789abcdefABCDEF", min_size=40, max_size=40)


@settings(max_examples=1000, deadline=None, suppress_health_check=[HealthCheck.too_slow])
@given(seeds=seeds_strategy, program=program_strategy)
def test_derived_addresses_are_off_curve(seeds, program):
    derived = find_program_address(seeds, program)
    assert not is_on_curve(derived.address)
    assert 0 <= derived.bump <= 255


@settings(max_examples=100, deadline=None)
@given(seeds=seeds_strategy, program=program_strategy)
def test_derivation_is_deterministic(seeds, program):
    assert find_program_address(seeds, program) == find_program_address(list(seeds), program)


@settings(max_examples=100, deadline=None)
@given(first=preimage_strategy, second=preimage_strategy)
def test_distinct_preimages_give_distinct_addresses(first, second):
    a = calc_replay_address(first, RECEIPT_PROGRAM)
    b = calc_replay_address(second, RECEIPT_PROGRAM)
    if first == second:
        assert a == b
    else:
        assert a.address != b.address


@settings(max_examples=200)
@given(digits=hex_strategy)
def test_ethereum_canonicalization_idempotent(digits):
    first = classify("0x" + digits)
    assert first.ecosystem is Ecosystem.ETHEREUM
    assert first.address == first.address.lower()
    assert classify(first.address) == first


@settings(max_examples=200)
@given(digits=st.text(alphabet="0123456789", min_size=5, max_size=20))
def test_digit_strings_are_discord(digits):
    assert classify(digits).ecosystem is Ecosystem.DISCORD


@settings(max_examples=200)
@given(
    digits=st.text(alphabet="0123456789abcdef", min_size=64, max_size=64),
    hint=st.sampled_from(["s", "su", "sui", "a", "ap", "apt", "apto", "aptos"]),
)
def test_move_addresses_with_hint_never_raise(digits, hint):
    result = classify("0x" + digits, hint.upper() if len(hint) % 2 else hint)
    expected = Ecosystem.SUI if hint.startswith("s") else Ecosystem.APTOS
    assert result.ecosystem is expected
