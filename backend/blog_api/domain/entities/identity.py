from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, as proven by a verified bearer credential."""

    user_id: int
