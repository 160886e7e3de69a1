# ruststats

Two small status-bar blocks for i3blocks and i3status. One reports CPU usage
and the other reports sensor temperature. Each one prints its current value
followed by a sparkline of its recent values.

## Installation

```
pip install .
```

This installs the commands `ruststats-cpu` and `ruststats-temperature`. You
can also run them as `python -m ruststats.cpu` and
`python -m ruststats.temperature`.

## Commands

### `ruststats-cpu`

The command reads the aggregate `cpu` line of `/proc/stat` twice, 100 ms
apart. It prints the share of non-idle time between the two readings, counted
from the user, nice, system and idle fields. Each reading is added to a
history kept in `/tmp/cpu_usage_history.json`. Only the newest `N` entries
are kept.

```
ruststats-cpu [-w WARN] [-c CRIT] [-o OUTPUT] [-n N]
```

- `-w`, `--warning`: warning threshold in percent (default `70.0`)
- `-c`, `--critical`: critical threshold in percent (default `90.0`)
- `-o`, `--output`: `text` or `text_and_sparkline` (default `text_and_sparkline`)
- `-n`, `--count`: sparkline length (default `20`)

The `text` format prints the whole percentage, for example `42%`. The
`text_and_sparkline` format prints one decimal and the sparkline, for example
`42.3% ▁▃▄▆▇`.

If `/proc/stat` cannot be read, the command prints
`Error reading /proc/stat` to standard error and exits with status 0.

### `ruststats-temperature`

The command runs `sensors -j` and averages every numeric `temp*_input`
reading it finds. It prints the average after an icon chosen by the
temperature. The history is kept in `/tmp/temperature_history.json`. The
command needs the lm-sensors `sensors` program.

```
ruststats-temperature [-w WARN] [-c CRIT] [--chip CHIP] [-o OUTPUT] [-n N]
```

- `-w`, `--warning`: warning threshold in °C (default `70`)
- `-c`, `--critical`: critical threshold in °C (default `90`)
- `--chip`: passed on to `sensors`, for example `coretemp-isa-0000`
- `-o`, `--output`: `text` or `text_and_sparkline` (default `text_and_sparkline`)
- `-n`, `--count`: sparkline length (default `5`)

The command exits with status 1 and a message on standard error in these
cases:

- `sensors` cannot be started
- `sensors` fails
- the output of `sensors` is not valid JSON
- no temperature reading is found

## Colours and exit status

If a value reaches the warning threshold, the command prints a second line,
`#FFFC00`. If the value reaches the critical threshold, the second line is
`#FF0000` and the command exits with status 33, which i3blocks shows as
urgent. An unknown `--output` value prints `Invalid output format` and exits
with status 1.

## i3blocks example

```
[cpu]
command=ruststats-cpu -n 15
interval=5

[temperature]
command=ruststats-temperature --chip coretemp-isa-0000
interval=10
```

## Library use

`ruststats.utils` provides these functions:

- `make_sparkline(data)` draws a sequence of numbers with the characters
  `▁▂▃▄▅▆▇`, scaled between the smallest and largest value.
- `read_history(path)` reads a JSON list of numbers. It returns an empty list
  if the file is missing or unreadable.
- `write_history(path, hist)` replaces the stored list. It ignores write
  errors.
- `update_history(path, value, max_len)` appends a value, keeps the newest
  `max_len` entries, saves them and returns them.

```python
from ruststats.utils import make_sparkline

print(make_sparkline([1.0, 2.0, 3.0, 4.0, 5.0]))  # ▁▃▄▆▇
```

`ruststats.cpu` provides two more functions:

- `read_proc_stat(path)` returns a `(total, idle)` pair, or `None`.
- `cpu_usage(first, second)` turns two of those pairs into a percentage.

`ruststats.temperature` provides these:

- `run_sensors(chip)` runs `sensors -j`. It raises `SensorsError` if that
  fails.
- `extract_temperatures(data)` collects the readings from the parsed output.
- `temperature_icon(avg)` picks the icon for a temperature.