"""Data carried by the raffle lifecycle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Optional, Tuple

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


class RaffleState(IntEnum):
    """Raffle states, numbered as `get_raffle_state()` reports them."""

    OPEN = 0
    CALCULATING = 1


@dataclass(frozen=True)
class RaffleConfig:
    """Constructor arguments of the raffle. Fixed for the lifetime of a deployment."""

    vrf_coordinator: str
    entrance_fee: int
    gas_lane: bytes
    interval: int
    callback_gas_limit: int
    subscription_id: int

    def constructor_args(self) -> tuple:
        return (
            self.vrf_coordinator,
            self.entrance_fee,
            self.gas_lane,
            self.interval,
            self.callback_gas_limit,
            self.subscription_id,
        )


@dataclass(frozen=True)
class RandomnessRequest:
    request_id: int
    issued_at: int


@dataclass(frozen=True)
class RaffleStorage:
    """Snapshot of everything the raffle persists between operations."""

    last_timestamp: int
    players: Tuple[str, ...] = ()
    raffle_state: RaffleState = RaffleState.OPEN
    balance: int = 0
    recent_winner: str = ZERO_ADDRESS
    pending_request: Optional[RandomnessRequest] = None


@dataclass(frozen=True)
class RaffleEntered:
    player: str


@dataclass(frozen=True)
class RequestedRaffleWinner:
    request_id: int


@dataclass(frozen=True)
class WinnerPicked:
    winner: str


@dataclass(frozen=True)
class Payout:
    recipient: str
    amount: int


class Transition(NamedTuple):
    storage: RaffleStorage
    events: Tuple[object, ...] = ()
    payouts: Tuple[Payout, ...] = ()
