"""A fixed-capacity car park counter."""

from __future__ import annotations

import argparse

__all__ = [
    "ParkingError",
    "ParkingFullError",
    "ParkingEmptyError",
    "ParkingSystem",
    "main",
]


class ParkingError(Exception):
    """Base class for every error the car park reports."""


class ParkingFullError(ParkingError):
    """Every space is taken."""


class ParkingEmptyError(ParkingError):
    """There is no car to remove."""


class ParkingSystem:
    """Counts cars in a car park with ``capacity`` spaces."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self.occupied = 0

    def park_car(self) -> None:
        if self.occupied >= self.capacity:
            raise ParkingFullError("Parking lot is full. Cannot park car.")
        self.occupied += 1

    def remove_car(self) -> None:
        if self.occupied <= 0:
            raise ParkingEmptyError("Parking lot is already empty.")
        self.occupied -= 1

    def available(self) -> int:
        """Number of free spaces."""
        return self.capacity - self.occupied


_MENU = "\n".join(
    [
        "",
        "Car Parking System",
        "1. Park Car",
        "2. Remove Car",
        "3. Display Available Spaces",
        "4. Exit",
    ]
)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive car park menu until the user exits."""
    parser = argparse.ArgumentParser(prog="parking", description="Car park counter.")
    parser.add_argument("--capacity", type=int, default=10, help="number of spaces")
    args = parser.parse_args(argv)
    lot = ParkingSystem(args.capacity)
    try:
        while True:
            print(_MENU)
            try:
                choice = int(input("Enter your choice: ").strip())
            except ValueError:
                choice = 0
            try:
                if choice == 1:
                    lot.park_car()
                    print("Car parked successfully.")
                elif choice == 2:
                    lot.remove_car()
                    print("Car removed from parking lot.")
                elif choice == 3:
                    print(f"Available parking spaces: {lot.available()}")
                elif choice == 4:
                    print("Exiting Program...")
                    return 0
                else:
                    print("Invalid choice! Please try again.")
            except ParkingError as error:
                print(error)
    except EOFError:
        return 0