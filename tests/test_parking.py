import io

import pytest

from deskapps.parking import (
    ParkingEmptyError,
    ParkingError,
    ParkingFullError,
    ParkingSystem,
    main,
)


def test_new_lot_is_empty():
    lot = ParkingSystem(3)
    assert lot.available() == 3
    assert lot.occupied == 0


def test_park_and_remove_round_trip():
    lot = ParkingSystem(3)
    lot.park_car()
    assert lot.available() == 2
    lot.remove_car()
    assert lot.available() == 3


def test_full_lot_rejects():
    lot = ParkingSystem(2)
    lot.park_car()
    lot.park_car()
    with pytest.raises(ParkingFullError):
        lot.park_car()
    assert lot.available() == 0


def test_empty_lot_rejects_removal():
    lot = ParkingSystem(2)
    with pytest.raises(ParkingEmptyError):
        lot.remove_car()
    assert lot.occupied == 0


def test_zero_capacity_is_full():
    with pytest.raises(ParkingError):
        ParkingSystem(0).park_car()


@pytest.mark.parametrize("cars", [0, 1, 4, 5])
def test_available_plus_occupied_is_capacity(cars):
    lot = ParkingSystem(5)
    for _ in range(cars):
        lot.park_car()
    assert lot.available() + lot.occupied == lot.capacity


def test_main_default_capacity(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n3\n2\n2\n8\n4\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Car parked successfully." in out
    assert "Available parking spaces: 9" in out
    assert "Parking lot is already empty." in out
    assert "Invalid choice! Please try again." in out
    assert "Exiting Program..." in out


def test_main_custom_capacity(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1\n4\n"))
    main(["--capacity", "1"])
    assert "Parking lot is full. Cannot park car." in capsys.readouterr().out