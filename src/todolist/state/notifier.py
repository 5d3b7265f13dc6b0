"""Change notification for state holders."""
from typing import Callable, List

Listener = Callable[["ChangeNotifier"], None]


class ChangeNotifier:
    """
    Subject half of an observer pair.

    Listeners are called synchronously, in subscription order, with the
    notifier as their only argument. Exceptions raised by a listener
    propagate to whoever triggered the notification.
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener.

        Args:
            listener: Callable invoked after every change

        Returns:
            A callable that unsubscribes the listener
        """
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a listener; unknown listeners are ignored."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    def notify(self) -> None:
        """Call every current listener."""
        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(self)
