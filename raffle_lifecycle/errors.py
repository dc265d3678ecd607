"""Failures raised by the raffle lifecycle and the mock coordinator.

Each exception carries the values the contract reports alongside the matching
revert, so callers can inspect why an operation was refused.
"""


class RaffleError(Exception):
    """Base class for refused raffle operations. State is left unchanged."""


class NotEnoughETHEntered(RaffleError):
    def __init__(self, amount: int, entrance_fee: int):
        self.amount = amount
        self.entrance_fee = entrance_fee
        super().__init__(f"Raffle__NotEnoughETHEntered: sent {amount}, fee is {entrance_fee}")


class NotOpen(RaffleError):
    def __init__(self, raffle_state):
        self.raffle_state = raffle_state
        super().__init__(f"Raffle__NotOpen: raffle is {raffle_state.name}")


class UpkeepNotNeeded(RaffleError):
    def __init__(self, balance: int, num_players: int, raffle_state):
        self.balance = balance
        self.num_players = num_players
        self.raffle_state = raffle_state
        super().__init__(
            f"Raffle__UpkeepNotNeeded: balance={balance} players={num_players} state={int(raffle_state)}"
        )


class NonexistentRequest(RaffleError):
    def __init__(self, request_id: int):
        self.request_id = request_id
        super().__init__(f"nonexistent request: {request_id}")


class OnlyCoordinatorCanFulfill(RaffleError):
    def __init__(self, sender: str, coordinator: str):
        self.sender = sender
        self.coordinator = coordinator
        super().__init__(f"Raffle__OnlyCoordinatorCanFulfill: {sender} is not {coordinator}")


class TransferFailed(RaffleError):
    def __init__(self, recipient: str, amount: int):
        self.recipient = recipient
        self.amount = amount
        super().__init__(f"Raffle__TransferFailed: could not pay {amount} to {recipient}")


class CoordinatorError(Exception):
    """Refusals from the randomness coordinator itself."""


class InvalidSubscription(CoordinatorError):
    def __init__(self, sub_id: int):
        self.sub_id = sub_id
        super().__init__(f"InvalidSubscription: {sub_id}")


class InvalidConsumer(CoordinatorError):
    def __init__(self, sub_id: int, consumer: str):
        self.sub_id = sub_id
        self.consumer = consumer
        super().__init__(f"InvalidConsumer: {consumer} is not registered on subscription {sub_id}")


class MustBeSubOwner(CoordinatorError):
    def __init__(self, sub_id: int, sender: str):
        self.sub_id = sub_id
        self.sender = sender
        super().__init__(f"MustBeSubOwner: {sender} does not own subscription {sub_id}")


class InsufficientBalance(CoordinatorError):
    def __init__(self, sub_id: int, balance: int, payment: int):
        self.sub_id = sub_id
        self.balance = balance
        self.payment = payment
        super().__init__(f"InsufficientBalance: subscription {sub_id} has {balance}, needs {payment}")
