# sensorlog

Tools for working with plain-text logs of sensor readings. Each line of a log
holds three whitespace-separated fields:

```
<unix timestamp> <sensor id> <value>
```

A value is read as a boolean (`true` / `false`), an integer, a decimal or,
failing those, a text token. Decimals are kept at single precision and
written with two decimal places.

The commands print their messages in Portuguese.

## Installation

```
pip install .
```

## Commands

### Generate test data

```
sensorlog-generate <start date> <start time> <end date> <end time> <sensor> <type> [<sensor> <type> ...]
```

Dates are written `YYYY-MM-DD` and times `HH:MM:SS`, in local time; the start
must come before the end. The type is one of `int`, `bool`, `float` or
`string`. For every sensor, 2000 readings with random timestamps inside the
interval are written to `dados.txt` in the current directory. Integers are
drawn from 0–999, decimals from 0.0–999.9, and text values are 16 random
letters.

```
sensorlog-generate 2024-01-01 00:00:00 2024-01-02 00:00:00 temp float door bool
```

### Split a log by sensor

```
sensorlog-split dados.txt
```

Readings are grouped by sensor id, sorted by timestamp, and written to one
file per sensor, named `<sensor>.txt`, in the current directory. At most 100
distinct sensors are kept; readings of further sensors are dropped. Lines
that cannot be parsed are printed and skipped.

### Find the closest reading

```
sensorlog-lookup temp 2024-01-01 12:00:00
```

Reads `temp.txt` (as written by `sensorlog-split`, so sorted by time) and
prints the reading whose timestamp is closest to the given date and time,
found by binary search.

## Library use

```python
from sensorlog.readings import parse_line
from sensorlog.lookup import find_closest
from sensorlog.timestamps import parse_timestamp

readings = [parse_line(line) for line in ("100 temp 21.5", "200 temp 22.0")]
print(find_closest(readings, 150).format())

target = parse_timestamp("2024-01-01", "12:00:00")  # epoch seconds, local time
```

Modules and their building blocks:

- `sensorlog.readings`: `ValueType`, `Reading` (with `format()`),
  `detect_type`, `parse_value` and `parse_line` (raises `ValueError` on a
  malformed line).
- `sensorlog.timestamps`: `parse_timestamp` (raises `ValueError` on a
  malformed date or time).
- `sensorlog.split`: `group_by_sensor` and `write_sensor_files`.
- `sensorlog.lookup`: `load_readings` and `find_closest`.
- `sensorlog.generate`: `SensorSpec`, `parse_sensor_specs`, `random_value`
  and `generate_lines` (accepts a `random.Random` for reproducible output).