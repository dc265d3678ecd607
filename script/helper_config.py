from eth_utils import to_bytes, to_checksum_address, to_wei

from raffle_lifecycle import RaffleConfig

DEVELOPMENT_CHAINS = ["pyevm", "anvil"]

# VRFCoordinatorV2Mock constructor args
BASE_FEE = to_wei(0.25, "ether")  # premium, paid in LINK
GAS_PRICE_LINK = 10**9  # LINK per gas

VRF_SUB_FUND_AMOUNT = to_wei(2, "ether")

NETWORK_CONFIG = {
    "pyevm": {
        "chain_id": 31337,
        "entrance_fee": to_wei(0.1, "ether"),
        "gas_lane": "0x79d3d8832d904592c0bf9818b621522c988bb8b0c05cdc3b15aea1b6e8db0c15",
        "callback_gas_limit": 500_000,
        "interval": 30,
    },
    "anvil": {
        "chain_id": 31337,
        "entrance_fee": to_wei(0.1, "ether"),
        "gas_lane": "0x79d3d8832d904592c0bf9818b621522c988bb8b0c05cdc3b15aea1b6e8db0c15",
        "callback_gas_limit": 500_000,
        "interval": 30,
    },
    "sepolia": {
        "chain_id": 11155111,
        "vrf_coordinator": "0x8103B0A8A00be2DDC778e6e7eaa21791Cd364625",
        "entrance_fee": to_wei(0.01, "ether"),
        "gas_lane": "0x474e34a077df58807dbe9c96d3c009b23b3c6d0cce433e59bbf5b34f823bc56c",
        "subscription_id": 0,  # set to your own subscription
        "callback_gas_limit": 500_000,
        "interval": 30,
    },
    "goerli": {
        "chain_id": 5,
        "vrf_coordinator": "0x2Ca8E0C643bDe4C2E08ab1fA0da3401AdAD7734D",
        "entrance_fee": to_wei(0.01, "ether"),
        "gas_lane": "0x79d3d8832d904592c0bf9818b621522c988bb8b0c05cdc3b15aea1b6e8db0c15",
        "subscription_id": 0,
        "callback_gas_limit": 500_000,
        "interval": 30,
    },
}


def is_development_chain(network_name: str) -> bool:
    return network_name in DEVELOPMENT_CHAINS


def get_network_config(network_name: str) -> dict:
    if network_name not in NETWORK_CONFIG:
        raise ValueError(
            f"No raffle configuration for network '{network_name}', "
            f"expected one of {sorted(NETWORK_CONFIG)}"
        )
    return NETWORK_CONFIG[network_name]


def get_raffle_config(network_name: str, vrf_coordinator: str, subscription_id: int) -> RaffleConfig:
    """Constructor arguments for `network_name` with a resolved coordinator."""
    network_config = get_network_config(network_name)
    return RaffleConfig(
        vrf_coordinator=to_checksum_address(vrf_coordinator),
        entrance_fee=network_config["entrance_fee"],
        gas_lane=to_bytes(hexstr=network_config["gas_lane"]),
        interval=network_config["interval"],
        callback_gas_limit=network_config["callback_gas_limit"],
        subscription_id=subscription_id,
    )
