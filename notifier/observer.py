# notifier/observer.py
from abc import ABC, abstractmethod

class IObserver(ABC):
    @abstractmethod
    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        """Called when the subject (Model) has new measurements."""
        ...

class IDisplayElement(ABC):
    @abstractmethod
    def display(self) -> None:
        """Render the observer's current state."""
        ...

class ISubject(ABC):
    @abstractmethod
    def register(self, observer: IObserver) -> None: ...
    @abstractmethod
    def remove(self, observer: IObserver) -> None: ...
    @abstractmethod
    def notify_observers(self) -> None: ...
