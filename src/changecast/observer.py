from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional
from abc import ABC, abstractmethod
import logging

from changecast.errors import RegistrationCapabilityError


logger = logging.getLogger(__name__)

DEFAULT_SELECTOR = "update"


@dataclass(frozen=True)
class ObserverEntry:
    target: Any
    selector: str
    callback: Callable[..., Any]


class Observable():
    """Keeps a list of observers and notifies them once the owner has
    flagged a change with `changed()`.

    Owners either hold an Observable and delegate to it, or inherit from it
    and call `super().__init__()`.
    Observers added without a selector are called on `default_selector`.
    """

    def __init__(self, default_selector: str = DEFAULT_SELECTOR) -> None:
        self.default_selector = default_selector
        self._observers: list[ObserverEntry] = []
        self._changed = False

    def add_observer(self, target: Any, selector: Optional[str] = None) -> None:
        """Register `target` so that `target.<selector>(*args)` is called on
        every notification round.

        Raises RegistrationCapabilityError if `target` has no callable
        attribute named `selector`. The same target may be added more than
        once, each registration is notified separately.
        """
        if selector is None:
            selector = self.default_selector
        callback = getattr(target, selector, None)
        if not callable(callback):
            raise RegistrationCapabilityError(target, selector)
        self._observers.append(ObserverEntry(target, selector, callback))
        logger.debug('Added observer %r (selector=%r)', target, selector)

    def delete_observer(self, target: Any) -> None:
        self._observers = [
            entry
            for entry in self._observers
            if entry.target is not target
        ]
        logger.debug('Deleted observer %r', target)

    def delete_observers(self) -> None:
        self._observers.clear()
        logger.debug('Deleted all observers')

    def count_observers(self) -> int:
        return len(self._observers)

    def changed(self, state: bool = True) -> None:
        self._changed = bool(state)

    def is_changed(self) -> bool:
        return self._changed

    def notify_observers(self, *args: Any) -> None:
        """Call every registered observer with `args` if the state has
        changed, then reset the changed state.

        Observers are called in registration order from a copy of the
        observer list taken before the first call, so additions and
        deletions made by an observer only apply to the next round. The
        changed state is reset before the first call. An exception raised
        by an observer propagates and the remaining observers are skipped.
        """
        if not self._changed:
            logger.debug('State unchanged, skipping notification')
            return
        observers = tuple(self._observers)
        self._changed = False
        for entry in observers:
            try:
                entry.callback(*args)
            except Exception:
                logger.debug(
                    'Observer %r failed on %r, skipping remaining observers',
                    entry.target,
                    entry.selector,
                )
                raise


class Observer(ABC):
    def __init__(self, observable: Optional[Observable] = None) -> None:
        if observable is not None:
            observable.add_observer(self, "update")

    @abstractmethod
    def update(self, *args: Any) -> Any:
        pass
