"""Randomness coordinator collaborator for the lifecycle model.

`MockVRFCoordinator` behaves like ``src/mocks/vrf_coordinator_v2_mock.vy``:
subscriptions are plain bookkeeping, request ids count up from 1, and words
derived by `fulfill_random_words` are ``keccak256(abi.encode(request_id, i))``,
so the model and the contract mock pick the same winners.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Sequence, Set

from eth_abi import encode
from eth_account import Account
from eth_utils import keccak

from raffle_lifecycle.errors import (
    InsufficientBalance,
    InvalidConsumer,
    InvalidSubscription,
    MustBeSubOwner,
    NonexistentRequest,
)

MAX_NUM_WORDS = 10


class RandomnessCoordinator(Protocol):
    address: str

    def request_random_words(
        self,
        consumer: str,
        key_hash: bytes,
        sub_id: int,
        minimum_request_confirmations: int,
        callback_gas_limit: int,
        num_words: int,
    ) -> int: ...


def derive_random_words(request_id: int, num_words: int) -> List[int]:
    return [
        int.from_bytes(keccak(encode(["uint256", "uint256"], [request_id, i])), "big")
        for i in range(num_words)
    ]


@dataclass
class Subscription:
    owner: str
    balance: int = 0
    consumers: Set[str] = field(default_factory=set)


@dataclass(frozen=True)
class PendingRequest:
    consumer: str
    sub_id: int
    num_words: int


class MockVRFCoordinator:
    def __init__(self, base_fee: int, gas_price_link: int, address: Optional[str] = None):
        self.base_fee = base_fee
        self.gas_price_link = gas_price_link
        self.address = address or Account.create().address
        self.subscriptions: Dict[int, Subscription] = {}
        self.requests: Dict[int, PendingRequest] = {}
        self.consumers: Dict[str, object] = {}
        self.last_request_id = 0

    def _subscription(self, sub_id: int) -> Subscription:
        if sub_id not in self.subscriptions:
            raise InvalidSubscription(sub_id)
        return self.subscriptions[sub_id]

    def create_subscription(self, owner: str) -> int:
        sub_id = len(self.subscriptions) + 1
        self.subscriptions[sub_id] = Subscription(owner=owner)
        return sub_id

    def fund_subscription(self, sub_id: int, amount: int) -> None:
        self._subscription(sub_id).balance += amount

    def add_consumer(self, sub_id: int, consumer, sender: str) -> None:
        """Register `consumer` (anything with an ``address`` and a
        ``raw_fulfill_random_words`` callback) on the subscription.

        Only the subscription owner may add consumers.
        """
        subscription = self._subscription(sub_id)
        if sender != subscription.owner:
            raise MustBeSubOwner(sub_id, sender)
        subscription.consumers.add(consumer.address)
        self.consumers[consumer.address] = consumer

    def consumer_is_added(self, sub_id: int, consumer_address: str) -> bool:
        return consumer_address in self._subscription(sub_id).consumers

    def request_random_words(
        self,
        consumer: str,
        key_hash: bytes,
        sub_id: int,
        minimum_request_confirmations: int,
        callback_gas_limit: int,
        num_words: int,
    ) -> int:
        subscription = self._subscription(sub_id)
        if consumer not in subscription.consumers:
            raise InvalidConsumer(sub_id, consumer)
        if num_words > MAX_NUM_WORDS:
            raise ValueError(f"NumWordsTooBig: {num_words} > {MAX_NUM_WORDS}")
        self.last_request_id += 1
        self.requests[self.last_request_id] = PendingRequest(consumer, sub_id, num_words)
        return self.last_request_id

    def fulfill_random_words(
        self, request_id: int, consumer_address: str, random_words: Optional[Sequence[int]] = None
    ) -> List[int]:
        """Deliver words for `request_id` to the consumer and charge the subscription.

        The request stays pending if the consumer's callback raises.
        """
        request = self.requests.get(request_id)
        if request is None:
            raise NonexistentRequest(request_id)
        subscription = self._subscription(request.sub_id)
        if consumer_address not in self.consumers:
            raise InvalidConsumer(request.sub_id, consumer_address)
        if subscription.balance < self.base_fee:
            raise InsufficientBalance(request.sub_id, subscription.balance, self.base_fee)
        if random_words is None:
            random_words = derive_random_words(request_id, request.num_words)

        self.consumers[consumer_address].raw_fulfill_random_words(self.address, request_id, random_words)
        del self.requests[request_id]
        subscription.balance -= self.base_fee
        return list(random_words)
