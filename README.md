# bearingtrack

Bearing-only tracking of a moving ship from three fixed sensors.

The package has two halves that talk through a plain text file:

- a **simulator** (`bearingtrack-simulate`) that moves a ship at constant
  velocity past three sensors and a sweeping radar. It records the ship's
  bearing whenever the sweep lines up with it. It then replays those readings
  in real time into a data file, adding Gaussian noise and dropping about one
  reading in ten;
- a **filter** (`bearingtrack-filter`) that follows the data file as it grows.
  It estimates a starting position from the first three bearings with
  Gauss–Newton, then refines position and velocity with an extended Kalman
  filter. It prints its estimates and writes them to a log file.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Running

Open two terminals in the same directory. Start the filter first, because it
only reads data appended after it starts:

```
bearingtrack-filter
```

Then start the simulator in the second terminal:

```
bearingtrack-simulate
```

The simulator waits three seconds, then writes each measurement at the moment
it was taken, echoing every line to standard error. The filter prints the
initial position and then one row per measurement:

```
Timestamp | x_estimate | y_estimate | vx_estimate | vy_estimate
```

### Options

`bearingtrack-filter`:

- `--data PATH` – measurement file to follow (default `data.txt`)
- `--log PATH` – file receiving the estimate rows; truncated at start
  (default `log.txt`)
- `--interval SECONDS` – polling interval (default `0.1`)

Lines that cannot be parsed, or that name an unknown sensor, are reported on
standard error and skipped. Stop the filter with Ctrl-C.

`bearingtrack-simulate`:

- `--output PATH` – file to write (default `data.txt`)
- `--count N` – number of measurements to simulate (default `100`)
- `--seed N` – random seed, for repeatable runs
- `--delay SECONDS` – wait before replaying (default `3`)

## Data format

Each line of the data file is a timestamp, a sensor id (1–3) and a bearing in
degrees, in fixed columns: the timestamp left-aligned in 7 characters, the
sensor id at column 8 and the bearing right-aligned in 10 characters from
column 10. A line is at most 21 characters including its newline:

```
0.52    2   152.3141
```

The sensors sit at (0, 0), (500, 0) and (250, 400). Sensor *n* has a bearing
noise standard deviation of 0.5·*n* degrees.

Each time the filter sees the file grow, it reads at most 21 bytes from where
the file previously ended, so it expects one line to be appended at a time.

## Library use

The pieces are importable on their own:

- `bearingtrack.parser.parse_measurement` turns a line into a `Measurement`.
- `bearingtrack.model` holds `FilterState` and the fixed model matrices
  (`sensor_positions`, `initial_covariance`, `process_noise`,
  `transition_matrix`, `bearing_jacobian`, `measurement_noise`).
- `bearingtrack.gauss.gauss_newton` triangulates a position from bearings,
  starting at the centroid of the sensors.
- `bearingtrack.ekf.predict`, `update` and `step` return a new `FilterState`.
- `bearingtrack.tracker.Tracker.feed` runs lines through the whole pipeline and
  returns each estimate row; `bearingtrack.tracker.follow` yields data appended
  to a file.
- `bearingtrack.simulation.Simulation.record` produces noise-free
  `SimMeasurement`s.
- `bearingtrack.writer.format_measurement` renders a line, and
  `write_measurements` replays measurements to a file, taking an optional
  `random.Random` and `sleep` function for testing.

## What it does not do

The filter only prints and logs its estimates as text. There is no plotting
and no comparison of the estimates against the simulated ship's true track.