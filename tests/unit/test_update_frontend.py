import json
from types import SimpleNamespace

from script.update_frontend import (
    ABI_FILE_NAME,
    ADDRESSES_FILE_NAME,
    get_constants_dir,
    update_abi,
    update_contract_addresses,
    update_frontend,
)

RAFFLE_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
OTHER_ADDRESS = "0xe7f1725E7734CE288F8367e1Bb143E90bb3F0512"


def test_new_file_gets_chain_entry(tmp_path):
    addresses_file = tmp_path / ADDRESSES_FILE_NAME

    update_contract_addresses(RAFFLE_ADDRESS, 31337, addresses_file)

    assert json.loads(addresses_file.read_text()) == {"31337": [RAFFLE_ADDRESS]}


def test_address_appended_once_per_chain(tmp_path):
    addresses_file = tmp_path / ADDRESSES_FILE_NAME
    addresses_file.write_text(json.dumps({"31337": [OTHER_ADDRESS]}))

    update_contract_addresses(RAFFLE_ADDRESS, 31337, addresses_file)
    update_contract_addresses(RAFFLE_ADDRESS, 31337, addresses_file)

    assert json.loads(addresses_file.read_text()) == {"31337": [OTHER_ADDRESS, RAFFLE_ADDRESS]}


def test_other_chains_are_kept(tmp_path):
    addresses_file = tmp_path / ADDRESSES_FILE_NAME
    addresses_file.write_text(json.dumps({"5": [OTHER_ADDRESS]}))

    contract_addresses = update_contract_addresses(RAFFLE_ADDRESS, 11155111, addresses_file)

    assert contract_addresses == {"5": [OTHER_ADDRESS], "11155111": [RAFFLE_ADDRESS]}


def test_abi_is_overwritten(tmp_path):
    abi_file = tmp_path / ABI_FILE_NAME
    abi_file.write_text("[]")
    abi = [{"type": "function", "name": "enter_raffle", "inputs": [], "outputs": []}]

    update_abi(abi, abi_file)

    assert json.loads(abi_file.read_text()) == abi


def test_update_frontend_writes_both_files(tmp_path):
    abi = [{"type": "function", "name": "get_entrance_fee", "inputs": [], "outputs": []}]
    raffle_contract = SimpleNamespace(address=RAFFLE_ADDRESS, abi=abi)

    update_frontend(raffle_contract, 31337, constants_dir=tmp_path)

    assert json.loads((tmp_path / ADDRESSES_FILE_NAME).read_text()) == {"31337": [RAFFLE_ADDRESS]}
    assert json.loads((tmp_path / ABI_FILE_NAME).read_text()) == abi


def test_constants_dir_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("FRONTEND_CONSTANTS_DIR", str(tmp_path))
    assert get_constants_dir() == tmp_path
