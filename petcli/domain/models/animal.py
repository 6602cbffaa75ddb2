"""Animal records.

``Animal`` is the abstract base shape holding the attributes every animal
shares. ``Dog`` is the only concrete variant. Shared behaviour lives in
plain functions (``describe_animal``) that variants call explicitly.
"""

from dataclasses import dataclass

from petcli.domain.interfaces.capabilities import Barking, Describable, Feedable
from petcli.domain.interfaces.user_interface import UserInterface
from petcli.domain.models.common import OutputLine


def describe_animal(animal: "Animal", ui: UserInterface) -> None:
    """Writes the description line common to all animals."""
    ui.display_output(OutputLine(f"I am {animal.name} and I am {animal.age} years old."))


@dataclass
class Animal(Describable):
    """Base shape for all animals. Not instantiable on its own."""
    name: str
    age: int


@dataclass
class Dog(Animal, Feedable, Barking):
    """A dog: an animal with a breed that can be fed and can bark."""
    breed: str

    def describe(self, ui: UserInterface) -> None:
        describe_animal(self, ui)
        ui.display_output(OutputLine(f"Breed: {self.breed}"))

    def feed(self, ui: UserInterface) -> None:
        ui.display_output(OutputLine(f"{self.name} is now eating."))

    def bark_n_times(self, n: int, ui: UserInterface) -> None:
        # range() of a non-positive count is empty
        for _ in range(n):
            ui.display_output(OutputLine("Bark!"))
