"""Generation of random sensor logs for testing."""

from __future__ import annotations

import random
import string
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from sensorlog.readings import Reading, Value, ValueType
from sensorlog.timestamps import parse_timestamp

READINGS_PER_SENSOR = 2000
OUTPUT_FILE = "dados.txt"
_LETTERS = string.ascii_lowercase + string.ascii_uppercase
_TEXT_LENGTH = 16


@dataclass(frozen=True)
class SensorSpec:
    """A sensor to generate and the kind of values it reports."""

    sensor_id: str
    value_type: ValueType


def parse_sensor_specs(args: Sequence[str]) -> list[SensorSpec]:
    """Parse '<id> <type>' pairs, type being int, bool, float or string."""
    args = list(args)
    if len(args) % 2:
        raise ValueError("sensor arguments must come in <id> <type> pairs")
    specs = []
    for sensor_id, type_name in zip(args[::2], args[1::2]):
        try:
            value_type = ValueType(type_name)
        except ValueError:
            raise ValueError(f"Tipo inválido: {type_name}") from None
        specs.append(SensorSpec(sensor_id, value_type))
    return specs


def random_value(value_type: ValueType, rng: random.Random) -> Value:
    """Draw a random value of the given type."""
    if value_type is ValueType.INTEGER:
        return rng.randrange(1000)
    if value_type is ValueType.BOOLEAN:
        return rng.randrange(2) == 0
    if value_type is ValueType.DECIMAL:
        return rng.randrange(10000) / 10.0
    return "".join(rng.choice(_LETTERS) for _ in range(_TEXT_LENGTH))


def generate_lines(
    specs: Iterable[SensorSpec],
    start: int,
    end: int,
    count: int = READINGS_PER_SENSOR,
    rng: random.Random | None = None,
) -> Iterator[str]:
    """Yield ``count`` random log lines per sensor with times in [start, end]."""
    if start >= end:
        raise ValueError("start must be before end")
    generator = rng if rng is not None else random.Random()
    specs = list(specs)

    def lines() -> Iterator[str]:
        for spec in specs:
            for _ in range(count):
                stamp = start + generator.randint(0, end - start)
                value = random_value(spec.value_type, generator)
                yield Reading(stamp, spec.sensor_id, value, spec.value_type).format()

    return lines()


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: write a random log to 'dados.txt'."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 6 or len(args) % 2:
        print(
            "Uso: sensorlog-generate <data_inicio> <hora_inicio> <data_fim> "
            "<hora_fim> <sensor1 tipo1> [sensor2 tipo2] ..."
        )
        return 1
    try:
        start = parse_timestamp(args[0], args[1])
        end = parse_timestamp(args[2], args[3])
    except ValueError:
        start = end = None
    if start is None or end is None or start >= end:
        print("Erro: intervalo de tempo inválido ou datas mal formatadas.")
        return 1
    try:
        specs = parse_sensor_specs(args[4:])
    except ValueError as exc:
        print(exc)
        return 1
    try:
        out = open(OUTPUT_FILE, "w", encoding="utf-8")
    except OSError:
        print("Erro ao criar arquivo de teste.")
        return 1
    with out:
        for line in generate_lines(specs, start, end):
            out.write(line + "\n")
    print(f"Arquivo '{OUTPUT_FILE}' feito .")
    return 0


if __name__ == "__main__":
    sys.exit(main())