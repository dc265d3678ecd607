import os
from typing import Optional

from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network
from src import raffle

from script.deploy_mock import deploy_mock
from script.helper_config import (
    VRF_SUB_FUND_AMOUNT,
    get_network_config,
    get_raffle_config,
    is_development_chain,
)
from script.update_frontend import update_frontend


def create_and_fund_subscription(vrf_coordinator: VyperContract) -> int:
    subscription_id = vrf_coordinator.createSubscription()
    vrf_coordinator.fundSubscription(subscription_id, VRF_SUB_FUND_AMOUNT)
    print(f"Subscription {subscription_id} funded with {VRF_SUB_FUND_AMOUNT}")
    return subscription_id


def deploy_raffle(network_name: str, vrf_coordinator: Optional[VyperContract] = None) -> VyperContract:
    """Deploy the raffle with the configuration of `network_name`.

    On development chains the raffle talks to a mock coordinator (`vrf_coordinator`,
    or a fresh one), gets its own funded subscription and is added as its consumer.
    Elsewhere the coordinator and subscription come from the network config.
    """
    if is_development_chain(network_name):
        if vrf_coordinator is None:
            vrf_coordinator = deploy_mock()
        vrf_coordinator_address = vrf_coordinator.address
        subscription_id = create_and_fund_subscription(vrf_coordinator)
    else:
        network_config = get_network_config(network_name)
        vrf_coordinator_address = network_config["vrf_coordinator"]
        subscription_id = network_config["subscription_id"]

    raffle_config = get_raffle_config(network_name, vrf_coordinator_address, subscription_id)
    raffle_contract = raffle.deploy(*raffle_config.constructor_args())
    print(f"Raffle deployed at: {raffle_contract.address}")

    if is_development_chain(network_name):
        vrf_coordinator.addConsumer(subscription_id, raffle_contract.address)
        print(f"Raffle added as consumer of subscription {subscription_id}")
    return raffle_contract


def moccasin_main() -> VyperContract:
    active_network = get_active_network()
    raffle_contract = deploy_raffle(active_network.name)

    if not active_network.is_local_or_forked_network() and active_network.has_explorer():
        print("Verifying on explorer...")
        result = active_network.moccasin_verify(raffle_contract)
        result.wait_for_verification()

    if os.getenv("UPDATE_FRONTEND"):
        chain_id = get_network_config(active_network.name)["chain_id"]
        update_frontend(raffle_contract, chain_id)

    print("----------------Deployed & Verified-------------")
    return raffle_contract
