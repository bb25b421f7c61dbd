from dataclasses import dataclass
from typing import Optional, Union

from eth_utils import to_wei

LOCAL_CHAIN_ID = 31337

DEVELOPMENT_CHAINS = ("pyevm", "anvil", "localhost", "hardhat")

# VRF coordinator mock parameters, in LINK wei
BASE_FEE = to_wei(0.25, "ether")
GAS_PRICE_LINK = 10**9
VRF_SUBSCRIPTION_FUND_AMOUNT = to_wei(2, "ether")

GAS_LANE_30_GWEI = "0x474e34a077df58807dbe9c96d3c009b23b3c6d0cce433e59bbf5b34f823bc56c"


class UnsupportedNetworkError(LookupError):
    pass


@dataclass(frozen=True)
class NetworkConfig:
    """Raffle deployment parameters for one chain."""

    name: str
    interval: int
    subscription_id: int = 0
    callback_gas_limit: int = 500_000
    entrance_fee: int = to_wei(0.01, "ether")
    gas_lane: str = GAS_LANE_30_GWEI
    vrf_coordinator: Optional[str] = None


NETWORK_CONFIG = {
    LOCAL_CHAIN_ID: NetworkConfig(
        name="localhost",
        interval=30,
        subscription_id=2369,
        callback_gas_limit=500_000,
        entrance_fee=to_wei(0.01, "ether"),
        gas_lane=GAS_LANE_30_GWEI,
    ),
    11155111: NetworkConfig(
        name="sepolia",
        interval=30,
        subscription_id=2369,
        callback_gas_limit=500_000,
        entrance_fee=to_wei(0.01, "ether"),
        gas_lane=GAS_LANE_30_GWEI,
        vrf_coordinator="0x8103b0a8a00be2ddc778e6e7eaa21791cd364625",
    ),
}


def get_network_config(chain_id: Union[int, str]) -> NetworkConfig:
    try:
        return NETWORK_CONFIG[int(chain_id)]
    except (KeyError, ValueError):
        raise UnsupportedNetworkError(f"No network config for chain id {chain_id!r}") from None


def is_development_chain(network_name: str) -> bool:
    return network_name in DEVELOPMENT_CHAINS


def resolve_chain_id(network_name: str, chain_id: Optional[int]) -> int:
    """Chain ID the tooling keys its config and front-end files on.

    Development chains all map to the local chain ID since an in-memory
    EVM's own chain ID carries no meaning for the front-end.
    """
    if is_development_chain(network_name):
        return LOCAL_CHAIN_ID
    if chain_id is None:
        raise UnsupportedNetworkError(f"Network {network_name!r} has no chain id")
    return int(chain_id)


def resolve_network_config(network_name: str, chain_id: Optional[int]) -> NetworkConfig:
    return get_network_config(resolve_chain_id(network_name, chain_id))
