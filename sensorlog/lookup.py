"""Find the reading of a sensor closest to a given moment."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

from sensorlog.readings import Reading, parse_line
from sensorlog.timestamps import parse_timestamp


def load_readings(path: str | Path) -> tuple[list[Reading], list[str]]:
    """Read a sensor file; return its readings and the lines that could not be parsed."""
    readings: list[Reading] = []
    invalid: list[str] = []
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            try:
                readings.append(parse_line(line))
            except ValueError:
                invalid.append(line)
    return readings, invalid


def find_closest(readings: Sequence[Reading], target: int) -> Reading:
    """Binary-search readings sorted by time for the one nearest to ``target``."""
    if not readings:
        raise ValueError("no readings to search")
    low, high = 0, len(readings) - 1
    best = 0
    smallest: int | None = None
    while low <= high:
        middle = (low + high) // 2
        stamp = readings[middle].time
        diff = abs(stamp - target)
        if smallest is None or diff < smallest:
            smallest, best = diff, middle
        if stamp < target:
            low = middle + 1
        elif stamp > target:
            high = middle - 1
        else:
            return readings[middle]
    return readings[best]


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: print the reading of a sensor nearest to a date and time."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print("Uso: sensorlog-lookup <sensor> <data AAAA-MM-DD> <hora HH:MM:SS>")
        return 1
    sensor, date, time = args
    try:
        target = parse_timestamp(date, time)
    except ValueError:
        print("data ou hora inválida. Faça no formato -> AAAA-MM-DD HH:MM:SS")
        return 1
    filename = f"{sensor}.txt"
    try:
        readings, invalid = load_readings(filename)
    except OSError:
        print(f"Arquivo {filename} não encontrado.")
        return 1
    for line in invalid:
        print(f"Linha nao existe: {line}", end="")
    if not readings:
        print("Nenhuma leitura encontrada.")
        return 0
    print(find_closest(readings, target).format())
    return 0


if __name__ == "__main__":
    sys.exit(main())