import json
from pathlib import Path

from moccasin.config import get_active_network

from script.helper_config import resolve_chain_id
from script.settings import Settings, get_settings


def dump_compact(data) -> str:
    return json.dumps(data, separators=(",", ":"))


def update_contract_addresses(addresses_file, chain_id, raffle_address: str) -> dict:
    """Record ``raffle_address`` under ``chain_id`` in the front-end address map.

    The map keys chain IDs as strings and keeps each chain's addresses in
    deployment order without duplicates.
    """
    addresses_file = Path(addresses_file)
    current_addresses = json.loads(addresses_file.read_text(encoding="utf-8"))
    chain_key = str(chain_id)

    if chain_key in current_addresses:
        if raffle_address not in current_addresses[chain_key]:
            current_addresses[chain_key].append(raffle_address)
    else:
        current_addresses[chain_key] = [raffle_address]

    addresses_file.write_text(dump_compact(current_addresses), encoding="utf-8")
    return current_addresses


def update_abi(abi_file, abi: list) -> None:
    Path(abi_file).write_text(dump_compact(abi), encoding="utf-8")


def front_end_up_to_date(raffle_address: str, chain_id, abi: list, settings: Settings) -> bool:
    current_addresses = json.loads(settings.front_end_addresses_file.read_text(encoding="utf-8"))
    if raffle_address not in current_addresses.get(str(chain_id), []):
        return False
    abi_file = settings.front_end_abi_file
    return abi_file.exists() and abi_file.read_text(encoding="utf-8") == dump_compact(abi)


def update_front_end(raffle, chain_id: int, settings: Settings) -> bool:
    """Export the Raffle's address and ABI; returns whether anything was written."""
    raffle_address = str(raffle.address)
    if front_end_up_to_date(raffle_address, chain_id, raffle.abi, settings):
        print(f"Front end already points at Raffle {raffle_address} on chain {chain_id}")
        return False

    print("Updating front end...")
    update_contract_addresses(settings.front_end_addresses_file, chain_id, raffle_address)
    update_abi(settings.front_end_abi_file, raffle.abi)
    print(f"Front end now points at Raffle {raffle_address} on chain {chain_id}")
    return True


def moccasin_main():
    settings = get_settings()
    if not settings.update_front_end:
        print("UPDATE_FRONT_END not set, skipping front end update")
        return None

    active_network = get_active_network()
    # deploys through script/deploy.py when no Raffle is recorded, which exports on its own
    raffle = active_network.manifest_named("raffle")
    chain_id = resolve_chain_id(active_network.name, active_network.chain_id)
    update_front_end(raffle, chain_id, settings)
    return raffle
