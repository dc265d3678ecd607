from raffle_lifecycle.coordinator import MockVRFCoordinator, RandomnessCoordinator, derive_random_words
from raffle_lifecycle.errors import (
    CoordinatorError,
    InsufficientBalance,
    InvalidConsumer,
    InvalidSubscription,
    MustBeSubOwner,
    NonexistentRequest,
    NotEnoughETHEntered,
    NotOpen,
    OnlyCoordinatorCanFulfill,
    RaffleError,
    TransferFailed,
    UpkeepNotNeeded,
)
from raffle_lifecycle.lifecycle import Raffle
from raffle_lifecycle.state import (
    ZERO_ADDRESS,
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
