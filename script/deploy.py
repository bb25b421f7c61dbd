from eth_utils import to_bytes
from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from script.accounts import load_private_key_account
from script.deploy_mock import create_subscription, deploy_mock
from script.helper_config import is_development_chain, resolve_chain_id, resolve_network_config
from script.settings import get_settings
from script.update_front_end import update_front_end


def deploy_raffle(network_name: str, chain_id=None):
    """Deploy the Raffle with the parameters of the given network.

    Returns ``(raffle_contract, vrf_coordinator)``; the coordinator is only
    returned on development chains, where a mock is deployed for it.
    """
    from src import raffle

    network_config = resolve_network_config(network_name, chain_id)

    if is_development_chain(network_name):
        vrf_coordinator = deploy_mock()
        subscription_id = create_subscription(vrf_coordinator)
        vrf_coordinator_address = vrf_coordinator.address
    else:
        vrf_coordinator = None
        subscription_id = network_config.subscription_id
        vrf_coordinator_address = network_config.vrf_coordinator

    raffle_contract = raffle.deploy(
        network_config.entrance_fee,
        network_config.interval,
        vrf_coordinator_address,
        to_bytes(hexstr=network_config.gas_lane),
        subscription_id,
        network_config.callback_gas_limit,
    )

    if vrf_coordinator is not None:
        vrf_coordinator.add_consumer(subscription_id, raffle_contract.address)

    print(f"Raffle deployed at: {raffle_contract.address}")
    return raffle_contract, vrf_coordinator


def moccasin_main() -> VyperContract:
    settings = get_settings()
    active_network = get_active_network()
    development = is_development_chain(active_network.name)

    if not development:
        load_private_key_account(settings)

    chain_id = resolve_chain_id(active_network.name, active_network.chain_id)
    raffle_contract, _ = deploy_raffle(active_network.name, chain_id)

    if not development and settings.etherscan_api_key:
        print("Verifying...")
        result = active_network.moccasin_verify(raffle_contract)
        result.wait_for_verification()

    if settings.update_front_end:
        update_front_end(raffle_contract, chain_id, settings)

    return raffle_contract
