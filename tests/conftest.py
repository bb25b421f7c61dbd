import pytest
from moccasin.config import get_active_network, get_or_initialize_config

from script.helper_config import is_development_chain, resolve_network_config
from script.settings import get_settings
import boa


@pytest.fixture(scope="session")
def settings():
    return get_settings()


@pytest.fixture(scope="session")
def contract_sources():
    """Skip contract suites when the Raffle sources are not in the project."""
    raffle = pytest.importorskip("src.raffle", reason="Raffle contract sources not found in src/")
    pytest.importorskip("src.mocks.mock_vrf_coordinator", reason="VRF coordinator mock not found in src/mocks/")
    return raffle


@pytest.fixture(scope="session")
def active_network():
    # plain pytest (outside `mox test`) has no global moccasin config yet
    get_or_initialize_config()
    return get_active_network()


@pytest.fixture(scope="session")
def network_config(active_network):
    return resolve_network_config(active_network.name, active_network.chain_id)


@pytest.fixture(scope="session")
def development_network(contract_sources, active_network, settings):
    """Only development chains get the local unit suite."""
    if not is_development_chain(active_network.name):
        pytest.skip(f"unit tests run on development chains, not {active_network.name}")
    if settings.gas_reporter_enabled:
        boa.env.enable_gas_profiling()
    print(f"Running unit tests on {active_network.name}")
    return active_network


@pytest.fixture(scope="session")
def account(development_network):
    """Default sender, funded with 10 ETH"""
    acct = boa.env.eoa
    boa.env.set_balance(acct, 10 * 10**18)
    return acct


@pytest.fixture(scope="session")
def deployment(development_network, account):
    from script.deploy import deploy_raffle

    with boa.env.prank(account):
        return deploy_raffle(development_network.name, development_network.chain_id)


@pytest.fixture(scope="session")
def raffle_contract(deployment):
    raffle_instance, _ = deployment
    return raffle_instance


@pytest.fixture(scope="session")
def mock_vrf(deployment):
    _, vrf_coordinator = deployment
    return vrf_coordinator


@pytest.fixture(scope="session")
def entrance_fee(raffle_contract):
    return raffle_contract.get_entrance_fee()


@pytest.fixture(scope="session")
def interval(raffle_contract):
    return raffle_contract.get_interval()


@pytest.fixture
def fn_isolation(raffle_contract, mock_vrf, entrance_fee, interval):
    # Roll the chain back after every test so each one starts from a fresh deployment
    with boa.env.anchor():
        yield


@pytest.fixture
def players():
    """Three funded entrants besides the default account."""
    addresses = [boa.env.generate_address() for _ in range(3)]
    for addr in addresses:
        boa.env.set_balance(addr, 10**18)
    return addresses

