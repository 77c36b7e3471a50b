"""
Outcome dialogs shown when a game ends.
"""

from dataclasses import dataclass

from .game_state import GameStatus


@dataclass(frozen=True)
class AlertItem:
    """Title, message and button text of an end-of-game dialog."""
    title: str
    message: str
    button_title: str


class AlertContext:
    HUMAN_WIN = AlertItem(title="You Win!", message="Wow! you're so smart", button_title="Retry")
    DRAW = AlertItem(title="You Draw!", message="That was close!", button_title="Retry")
    COMPUTER_WIN = AlertItem(title="You Lost!", message="Better luck next time", button_title="Retry")

    @classmethod
    def for_status(cls, status: GameStatus) -> AlertItem:
        """Get the dialog for a finished game."""
        alerts = {
            GameStatus.HUMAN_WIN: cls.HUMAN_WIN,
            GameStatus.COMPUTER_WIN: cls.COMPUTER_WIN,
            GameStatus.DRAW: cls.DRAW,
        }
        if status not in alerts:
            raise ValueError(f"No alert for a game that is still {status.value}")
        return alerts[status]
