"""
Address derivation for the Replay SDK.

This module computes program-derived addresses: deterministic, off-curve
account addresses owned by a program and addressed by a list of seeds.
"""
from replay_sdk.derivation.curve import is_on_curve
from replay_sdk.derivation.pda import create_program_address, find_program_address

__all__ = [
    'create_program_address',
    'find_program_address',
    'is_on_curve',
]
