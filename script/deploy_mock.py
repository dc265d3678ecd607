from moccasin.boa_tools import VyperContract
from src.mocks import vrf_coordinator_v2_mock

from script.helper_config import BASE_FEE, GAS_PRICE_LINK


def deploy_mock() -> VyperContract:
    mock = vrf_coordinator_v2_mock.deploy(BASE_FEE, GAS_PRICE_LINK)
    print(f"Mock VRF Coordinator at: {mock.address}")
    return mock


def moccasin_main() -> VyperContract:
    return deploy_mock()
