# marsrover

Mission control for rovers exploring a rectangular plateau on Mars, served
as a small JSON API over HTTP.

A mission control belongs to a user and holds one platform (a grid of given
width and height) and any number of rovers. Each rover has a position and
faces one of the four compass directions `N`, `E`, `S` or `W`. Rovers obey
three commands:

- `L` turns the rover 90 degrees to the left,
- `R` turns it 90 degrees to the right,
- `M` moves it one cell forward (`N` increases `y`, `E` increases `x`).

A rover never leaves the platform and never drives onto an obstacle: a move
that would do either is ignored. A `Platform` built with
`allow_wrap_around=True` has no edges, so a rover leaving one side comes back
on the opposite side. When a new rover is asked for a cell that another rover
already occupies, it is put on the next free cell, scanning along the row and
then on to the start of the next row.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

```
mars-rover-http
```

Starts the HTTP server. It loads a `.env` file from the working directory
and listens on the port given by the `PORT` variable, or on port 8080 if it
is not set:

```
PORT=8080
```

If there is no `.env` file in the working directory the server logs
`Error loading .env file` and exits with status 1.

```
mars-rover-cli
```

Prints `Hello, Mars Rover!`.

## API

Unknown paths get `404 Not Found`; a known path with the wrong method gets
`405 Method Not Allowed`.

### `GET /api/health`

```json
{"status":"OK"}
```

### `POST /api/mission-control`

Creates a user, a platform and its rovers. A rover without an
`initial_position` asks for `(0, 0)`. Keys are matched exactly first and
then without regard to case, so `"x"` and `"X"` both work.

```json
{
  "username": "alice",
  "platform": {"width": 10, "height": 10},
  "rovers": [
    {"initial_position": {"x": 1, "y": 2}, "direction": "N"},
    {"initial_position": {"x": 3, "y": 3}, "direction": "E"}
  ]
}
```

The request may carry `allow_wrap_around`; it is read but the platform
created through the API is always bounded.

The reply describes what was created (`rovers` is `null` when none were
requested):

```json
{
  "message": "Platform created successfully",
  "mission_control": {"uuid": "..."},
  "platform": {"width": 10, "height": 10},
  "rovers": [
    {"uuid": "...", "position": {"x": 1, "y": 2}, "direction": "N"},
    {"uuid": "...", "position": {"x": 3, "y": 3}, "direction": "E"}
  ]
}
```

A direction other than `N`, `E`, `S` or `W`, or a platform with no free
cell left, fails with `unable to create rovers: <reason>`.

### `GET /api/mission-control/{username}`

Returns the same shape for an existing user, with the message
`"Mission Control retrieved successfully"`.

### `POST /api/mission-control/{username}/move-rovers`

Sends a string of commands to each named rover, in order:

```json
{
  "rovers": [
    {"uuid": "<rover uuid>", "commands": "LMLMLMLMM"},
    {"uuid": "<rover uuid>", "commands": "MMRMMRMRRM"}
  ]
}
```

The reply carries the message `"Rovers moved successfully"` and the
position and heading of every rover of the user's mission control.

### Errors

A body that is empty, is not valid JSON, or has values of the wrong type
gets `400 Bad Request`. An unknown user or rover, or a command other than
`L`, `R` or `M`, gets `500 Internal Server Error` with the reason
(`user not found`, `mission control not found`, `rover not found`,
`invalid command`) as plain text.

## Using it as a library

The pieces behind the API can be used on their own:

```python
from marsrover.common import Direction, Position
from marsrover.domain import Platform, Rover

platform = Platform(10, 10, [Position(0, 5)])
rover = Rover(Position(1, 2), Direction.NORTH, platform)
for command in "LMLMLMLMM":
    rover.execute_command(command)
print(rover.position, rover.direction)  # Position(x=1, y=3) Direction.NORTH
```

- `marsrover.common` holds `Command`, `Direction` (with `left()` and
  `right()`), `Position` and the UUID sources `RandomUUIDGenerator` and
  `FixedUUIDGenerator`.
- `marsrover.domain` holds `Platform`, `Rover`, `RoverFactory`,
  `MissionControl` and `User`; broken rules raise `DomainError`.
- `marsrover.usecases` holds `CreateMissionControlUseCase`,
  `GetMissionControlByUsernameUseCase` and `MoveRoversUseCase`, which take
  the request objects from `marsrover.dto` and raise `UseCaseError` or
  `marsrover.repositories.NotFoundError`.
- `marsrover.container.build_container()` wires the in-memory repositories,
  use cases and controllers together, and
  `marsrover.container.create_router(container)` returns a `Router`: call
  its `dispatch(method, path, body)` directly, or host it with any WSGI
  server, since it is a WSGI application.

## Limits

Everything is kept in process memory: users, platforms and rovers are gone
when the server stops, and there is no persistent storage. Obstacles can
only be set through the library (`Platform.obstacles`,
`Rover.set_obstacles`); the HTTP API has no way to place them.