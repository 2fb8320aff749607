"""Split a mixed sensor log into one time-ordered file per sensor."""

from __future__ import annotations

import sys
from operator import attrgetter
from pathlib import Path
from typing import Iterable, Mapping, Sequence

from sensorlog.readings import Reading, parse_line

MAX_SENSORS = 100


def group_by_sensor(
    lines: Iterable[str], max_sensors: int = MAX_SENSORS
) -> tuple[dict[str, list[Reading]], list[str]]:
    """Group parsed readings by sensor, in order of first appearance.

    Returns the groups and the lines that could not be parsed. Readings of
    sensors beyond ``max_sensors`` are dropped.
    """
    groups: dict[str, list[Reading]] = {}
    invalid: list[str] = []
    for line in lines:
        try:
            reading = parse_line(line)
        except ValueError:
            invalid.append(line)
            continue
        bucket = groups.get(reading.sensor_id)
        if bucket is None:
            if len(groups) >= max_sensors:
                continue
            bucket = groups[reading.sensor_id] = []
        bucket.append(reading)
    return groups, invalid


def write_sensor_files(
    groups: Mapping[str, Sequence[Reading]], directory: str | Path = "."
) -> list[Path]:
    """Write each group, sorted by time, to '<sensor>.txt'; return the paths written.

    Files that cannot be created are skipped.
    """
    written: list[Path] = []
    for name, readings in groups.items():
        path = Path(directory) / f"{name}.txt"
        try:
            with path.open("w", encoding="utf-8") as out:
                for reading in sorted(readings, key=attrgetter("time")):
                    out.write(reading.format() + "\n")
        except OSError:
            continue
        written.append(path)
    return written


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: split the given log file in the current directory."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Uso: sensorlog-split <arquivo_de_entrada>")
        return 1
    try:
        handle = open(args[0], encoding="utf-8", errors="replace")
    except OSError:
        print("Erro ao abrir arquivo.")
        return 1
    with handle:
        groups, invalid = group_by_sensor(handle)
    for line in invalid:
        print(f"Linha inválida: {line}", end="")
    write_sensor_files(groups)
    return 0


if __name__ == "__main__":
    sys.exit(main())