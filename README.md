# usblview

Tools for replaying recordings from an ultra-short baseline (USBL) acoustic
positioning system. The package finds the positioning packets in a recorded
`.dat` stream and turns them into timestamped fixes. It can also plot the
track to an image file and stream the track as UDP messages to a simulator.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

```
usblview recording.dat
```

This reads the recording and prints one block per fix: the GPS time (UTC)
followed by east, north and up in metres, each to six decimals. The other
steps only run when you ask for them:

- `--plot IMAGE` saves the top view, side view and per-axis plots of the
  valid fixes to `IMAGE`.
- `--send` sends the initial position `23915,23990,8765` to
  `--position-port` (default 12345). It then sends the trajectory built from
  the valid fixes to `--trajectory-port` (default 1623), one datagram per
  point.
- `--host` sets the receiver's IPv4 address (default `127.0.0.1`).
- `--delay` sets the pause between trajectory points in seconds
  (default 0.01).
- `-v` / `--verbose` turns on debug logging.

The command exits with status 1 in three cases: the file cannot be opened,
there are no valid fixes to plot, or sending fails. It exits with 0 otherwise.

## Library use

```python
from usblview.decoder import read_fixes
from usblview.plot import plot_fixes
from usblview.trajectory import trajectory_from_fixes
from usblview.sender import TrajectorySender

fixes = read_fixes("recording.dat")
for fix in fixes:
    print(fix.display_text())

plot_fixes(fixes, "track.png")

with TrajectorySender() as sender:
    sender.send(trajectory_from_fixes(fixes))
```

The modules:

- `usblview.packet`: `UploadComplexPacket` is the binary layout of the
  upload packet. It has `from_bytes` and `to_bytes`, and both raise
  `ValueError` on a wrong size. `decode_double` reads the 8-byte
  little-endian fields.
- `usblview.decoder`: `StreamDecoder.feed` pushes raw chunks of up to 2048
  bytes into a sliding window and returns the `Fix` objects that the chunk
  completed. `read_fixes` decodes a whole file. `gps_time_text` turns a raw
  GPS week/seconds-of-week field into a `YYYY-MM-DD HH:MM:SS` UTC string.
  A `Fix` has `x`, `y`, `z`, `status`, `time`, a `valid` property and
  `display_text()`.
- `usblview.trajectory`: `Point3` is an integer point. Its `to_message()`
  gives the `x+y#z*` text sent to the simulator. `trajectory_from_fixes`
  scales valid fixes by 35 and shifts x and y by 23915. There are also
  generators for fixed trajectories: `circle_trajectory`,
  `recycle_trajectory` and `guide_trajectory`.
- `usblview.sender`: `PositionSender.send_position` sends one `x,y,z` text,
  formatted by `format_position`. `TrajectorySender.send` sends every point
  of a trajectory and returns the messages it sent. Both senders work as
  context managers and have `close()`.
- `usblview.plot`: `plot_fixes(fixes, path)` draws the valid fixes and
  returns a matplotlib `Figure`. It saves the figure to `path` unless `path`
  is `None`. It raises `ValueError` when there are no valid fixes.

Positions in a fix take the origin at the recovery device: the array
coordinates in each packet are negated. Fixes with a status byte of zero
count as outliers. They are still printed, but they are left out of the
plots and of the trajectory.

## What it does not do

There is no interactive window. The plots are static images rather than an
animated display. The package does not read live data from a serial port or
a network link: it works only from recorded files.