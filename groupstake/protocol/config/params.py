# MIT License
# Copyright (c) 2025 Hashborn

import os
from typing import Dict

# Global Constants
DENOM = "celo"
DECIMALS = 18

# Group member scores are fixed-point with 24 decimals (10**24 == 100%).
# Dividing by 10**22 yields a percentage.
SCORE_DECIMALS = 22

ELECTION_CONTRACT = "Election"
LOCKED_GOLD_CONTRACT = "LockedGold"

class NetworkConfig:
    def __init__(self,
                 network_id: str,
                 chain_id: int,
                 election_address: str,
                 locked_gold_address: str,
                 decimals: int = DECIMALS,
                 score_decimals: int = SCORE_DECIMALS,
                 # Display precision of avg group scores
                 score_display_decimals: int = 0,
                 # Random group picker only considers groups scoring at least this (percent)
                 min_group_score_for_random: float = 90):
        self.network_id = network_id
        self.chain_id = chain_id
        self.election_address = election_address
        self.locked_gold_address = locked_gold_address
        self.decimals = decimals
        self.score_decimals = score_decimals
        self.score_display_decimals = score_display_decimals
        self.min_group_score_for_random = min_group_score_for_random

NETWORKS: Dict[str, NetworkConfig] = {
    "mainnet": NetworkConfig(
        network_id="mainnet",
        chain_id=42220,
        election_address="0x8D6677192144292870907E3Fa8A5527fE55A7ff6",
        locked_gold_address="0x6cC083Aed9e3ebe302A6336dBC7c921C9f03349E",
    ),
    "devnet": NetworkConfig(
        network_id="devnet",
        chain_id=1337,
        # Deterministic addresses for local development
        election_address="0x000000000000000000000000000000000000ce10",
        locked_gold_address="0x000000000000000000000000000000000000ce11",
        min_group_score_for_random=0,
    ),
}

def get_network(network_id: str) -> NetworkConfig:
    if network_id not in NETWORKS:
        raise ValueError(f"Unknown network: {network_id} (known: {', '.join(NETWORKS)})")
    return NETWORKS[network_id]

CURRENT_NETWORK = get_network(os.environ.get("GROUPSTAKE_NETWORK", "mainnet"))
