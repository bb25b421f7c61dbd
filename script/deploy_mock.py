from moccasin.boa_tools import VyperContract

from script.helper_config import BASE_FEE, GAS_PRICE_LINK, VRF_SUBSCRIPTION_FUND_AMOUNT


def deploy_mock() -> VyperContract:
    from src.mocks import mock_vrf_coordinator

    mock = mock_vrf_coordinator.deploy(BASE_FEE, GAS_PRICE_LINK)
    print(f"Mock VRF Coordinator at: {mock.address}")
    return mock


def create_subscription(vrf_coordinator: VyperContract) -> int:
    """Create and fund a VRF subscription on the mock coordinator."""
    subscription_id = vrf_coordinator.create_subscription()
    vrf_coordinator.fund_subscription(subscription_id, VRF_SUBSCRIPTION_FUND_AMOUNT)
    print(f"Funded subscription {subscription_id} with {VRF_SUBSCRIPTION_FUND_AMOUNT}")
    return subscription_id


def moccasin_main() -> VyperContract:
    return deploy_mock()
