# MIT License
# Copyright (c) 2025 Hashborn

"""
groupstake: client-side validation and planning for validator group staking.

Decides whether a stake, unstake or transfer is legal, how much it may move,
and which ordered Election transactions realize it.
"""

__version__ = "0.1.0"
