"""Raffle lifecycle: OPEN -> CALCULATING -> OPEN.

The module-level functions are pure. They take the current `RaffleStorage`
snapshot and return a `Transition` (new snapshot, emitted events, payouts to
make), or raise a `RaffleError` without touching anything. `Raffle` wraps them
into the stateful contract surface, commits a transition only once its payouts
succeed, and talks to the randomness coordinator it was given.
"""

from __future__ import annotations

import time
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from eth_account import Account

from raffle_lifecycle.errors import (
    NonexistentRequest,
    NotEnoughETHEntered,
    NotOpen,
    OnlyCoordinatorCanFulfill,
    TransferFailed,
    UpkeepNotNeeded,
)
from raffle_lifecycle.state import (
    Payout,
    RaffleConfig,
    RaffleEntered,
    RaffleState,
    RaffleStorage,
    RandomnessRequest,
    RequestedRaffleWinner,
    Transition,
    WinnerPicked,
)

REQUEST_CONFIRMATIONS = 3
NUM_WORDS = 1


def enter(config: RaffleConfig, storage: RaffleStorage, player: str, amount: int) -> Transition:
    if amount < config.entrance_fee:
        raise NotEnoughETHEntered(amount, config.entrance_fee)
    if storage.raffle_state != RaffleState.OPEN:
        raise NotOpen(storage.raffle_state)
    new_storage = replace(
        storage,
        players=storage.players + (player,),
        balance=storage.balance + amount,
    )
    return Transition(new_storage, (RaffleEntered(player),))


def check_upkeep(config: RaffleConfig, storage: RaffleStorage, now: int) -> bool:
    is_open = storage.raffle_state == RaffleState.OPEN
    time_passed = (now - storage.last_timestamp) >= config.interval
    has_players = len(storage.players) > 0
    has_balance = storage.balance > 0
    return is_open and time_passed and has_players and has_balance


def require_upkeep(config: RaffleConfig, storage: RaffleStorage, now: int) -> None:
    if not check_upkeep(config, storage, now):
        raise UpkeepNotNeeded(storage.balance, len(storage.players), storage.raffle_state)


def perform_upkeep(config: RaffleConfig, storage: RaffleStorage, now: int, request_id: int) -> Transition:
    """Move to CALCULATING with `request_id` as the single pending request."""
    require_upkeep(config, storage, now)
    new_storage = replace(
        storage,
        raffle_state=RaffleState.CALCULATING,
        pending_request=RandomnessRequest(request_id=request_id, issued_at=now),
    )
    return Transition(new_storage, (RequestedRaffleWinner(request_id),))


def fulfill_random_words(
    storage: RaffleStorage, request_id: int, random_words: Sequence[int], now: int
) -> Transition:
    """Pick the winner for the pending request and reopen the raffle.

    The winner is ``players[random_words[0] % len(players)]`` and is owed the
    whole balance, returned as the transition's single payout.
    """
    pending = storage.pending_request
    if storage.raffle_state != RaffleState.CALCULATING or pending is None or pending.request_id != request_id:
        raise NonexistentRequest(request_id)
    if not random_words:
        raise ValueError("random_words must hold at least one word")

    index_of_winner = random_words[0] % len(storage.players)
    winner = storage.players[index_of_winner]
    new_storage = RaffleStorage(last_timestamp=now, recent_winner=winner)
    return Transition(
        new_storage,
        (WinnerPicked(winner),),
        (Payout(recipient=winner, amount=storage.balance),),
    )


class Raffle:
    """Stateful raffle driven through the same calls as the deployed contract.

    `coordinator` must provide ``address`` and ``request_random_words``.
    `transfer(recipient, amount)` pays out prizes and returns whether the
    payment went through. By default winnings are credited to `self.winnings`.
    `clock` returns the current timestamp in seconds.
    """

    def __init__(
        self,
        config: RaffleConfig,
        coordinator,
        address: Optional[str] = None,
        clock: Optional[Callable[[], int]] = None,
        transfer: Optional[Callable[[str, int], bool]] = None,
    ):
        self.config = config
        self.coordinator = coordinator
        self.address = address or Account.create().address
        self.clock = clock or (lambda: int(time.time()))
        self.transfer = transfer or self._credit
        self.winnings: Dict[str, int] = {}
        self.events: List[object] = []
        self.storage = RaffleStorage(last_timestamp=self.clock())

    def _credit(self, recipient: str, amount: int) -> bool:
        self.winnings[recipient] = self.winnings.get(recipient, 0) + amount
        return True

    def _commit(self, transition: Transition) -> None:
        for payout in transition.payouts:
            if not self.transfer(payout.recipient, payout.amount):
                raise TransferFailed(payout.recipient, payout.amount)
        self.storage = transition.storage
        self.events.extend(transition.events)

    def enter_raffle(self, player: str, value: int) -> None:
        self._commit(enter(self.config, self.storage, player, value))

    def check_upkeep(self, check_data: bytes = b"") -> Tuple[bool, bytes]:
        return check_upkeep(self.config, self.storage, self.clock()), b""

    def perform_upkeep(self, perform_data: bytes = b"") -> int:
        now = self.clock()
        require_upkeep(self.config, self.storage, now)
        request_id = self.coordinator.request_random_words(
            self.address,
            self.config.gas_lane,
            self.config.subscription_id,
            REQUEST_CONFIRMATIONS,
            self.config.callback_gas_limit,
            NUM_WORDS,
        )
        self._commit(perform_upkeep(self.config, self.storage, now, request_id))
        return request_id

    def raw_fulfill_random_words(self, sender: str, request_id: int, random_words: Sequence[int]) -> None:
        if sender != self.config.vrf_coordinator:
            raise OnlyCoordinatorCanFulfill(sender, self.config.vrf_coordinator)
        self._commit(fulfill_random_words(self.storage, request_id, random_words, self.clock()))

    def get_entrance_fee(self) -> int:
        return self.config.entrance_fee

    def get_interval(self) -> int:
        return self.config.interval

    def get_gas_lane(self) -> bytes:
        return self.config.gas_lane

    def get_vrf_coordinator(self) -> str:
        return self.config.vrf_coordinator

    def get_subscription_id(self) -> int:
        return self.config.subscription_id

    def get_raffle_state(self) -> RaffleState:
        return self.storage.raffle_state

    def get_player(self, index: int) -> str:
        if index < 0:
            raise IndexError(index)
        return self.storage.players[index]

    def get_number_of_players(self) -> int:
        return len(self.storage.players)

    def get_recent_winner(self) -> str:
        return self.storage.recent_winner

    def get_last_timestamp(self) -> int:
        return self.storage.last_timestamp

    def get_balance(self) -> int:
        return self.storage.balance
