import boa
import pytest
from eth_utils import to_wei

from script.deploy import deploy_raffle
from script.deploy_mock import deploy_mock
from script.helper_config import get_network_config

LOCAL_NETWORK = "pyevm"

REJECTING_PLAYER = """
# pragma version ^0.4.1

interface Raffle:
    def enter_raffle(): payable

@external
@payable
def enter(raffle: address):
    extcall Raffle(raffle).enter_raffle(value=msg.value)
"""


@pytest.fixture(scope="session")
def network_config():
    """Raffle parameters of the local network the unit tests deploy to"""
    return get_network_config(LOCAL_NETWORK)


@pytest.fixture
def account():
    """The default sender, funded with 10 ETH"""
    acct = boa.env.eoa
    boa.env.set_balance(acct, to_wei(10, "ether"))
    return acct


@pytest.fixture
def mock_vrf(account):
    """Deploy the mock VRF coordinator"""
    return deploy_mock()


@pytest.fixture
def raffle_contract(mock_vrf):
    """Deploy the raffle as a consumer of a funded mock subscription"""
    return deploy_raffle(LOCAL_NETWORK, vrf_coordinator=mock_vrf)


@pytest.fixture
def entrance_fee(raffle_contract):
    return raffle_contract.get_entrance_fee()


@pytest.fixture
def interval(raffle_contract):
    return raffle_contract.get_interval()


@pytest.fixture
def players(entrance_fee):
    """Five funded player addresses"""
    addrs = [boa.env.generate_address() for _ in range(5)]
    for addr in addrs:
        boa.env.set_balance(addr, entrance_fee * 10)
    return addrs


@pytest.fixture
def rejecting_player():
    """A contract player that enters the raffle but cannot receive ETH"""
    return boa.loads(REJECTING_PLAYER)
