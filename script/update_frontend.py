import json
import os
from pathlib import Path
from typing import Optional

from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from script.helper_config import get_network_config

FRONTEND_CONSTANTS_DIR = Path("../nextjs-smartcontract-lottery/constants")
ADDRESSES_FILE_NAME = "contractAddresses.json"
ABI_FILE_NAME = "abi.json"


def get_constants_dir() -> Path:
    return Path(os.getenv("FRONTEND_CONSTANTS_DIR", FRONTEND_CONSTANTS_DIR))


def update_contract_addresses(address: str, chain_id: int, addresses_file: Path) -> dict:
    """Record `address` under `chain_id` in the frontend's address book."""
    addresses_file = Path(addresses_file)
    if addresses_file.exists():
        contract_addresses = json.loads(addresses_file.read_text())
    else:
        contract_addresses = {}

    chain_key = str(chain_id)
    if chain_key in contract_addresses:
        if address not in contract_addresses[chain_key]:
            contract_addresses[chain_key].append(address)
            print(f"Adding {address} to chain {chain_key} ...")
    else:
        contract_addresses[chain_key] = [address]
        print(f"Adding chain {chain_key} with {address} ...")

    addresses_file.write_text(json.dumps(contract_addresses))
    return contract_addresses


def update_abi(abi: list, abi_file: Path) -> None:
    Path(abi_file).write_text(json.dumps(abi))
    print(f"ABI written to {abi_file}")


def update_frontend(raffle_contract: VyperContract, chain_id: int, constants_dir: Optional[Path] = None) -> None:
    constants_dir = Path(constants_dir) if constants_dir else get_constants_dir()
    print("Updating front end ...")
    update_contract_addresses(str(raffle_contract.address), chain_id, constants_dir / ADDRESSES_FILE_NAME)
    update_abi(raffle_contract.abi, constants_dir / ABI_FILE_NAME)


def moccasin_main() -> None:
    active_network = get_active_network()
    raffle_contract = active_network.manifest_named("raffle")
    chain_id = get_network_config(active_network.name)["chain_id"]
    update_frontend(raffle_contract, chain_id)
