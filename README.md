# pokedex

An interactive command-line Pokedex. Page through location areas, explore them
to see which Pokemon appear there, try to catch Pokemon, and inspect the ones
you have caught. Data comes from the public PokeAPI. Responses are kept in an
in-memory cache. Every five minutes, entries more than five minutes old are
removed, so a repeated request within that time is answered without going back
to the network.

## Installation

```
pip install .
```

The package needs Python 3.10 or later and has no third-party dependencies.

## Usage

Start the prompt:

```
pokedex
```

You will see a `Pokedex > ` prompt. Input is lower-cased and split on
whitespace. The first word is the command and the rest are its arguments. The
prompt runs until you type `exit` or standard input ends.

| Command                   | What it does                           |
|---------------------------|----------------------------------------|
| `help`                    | Displays a help message                |
| `map`                     | Get the next page of locations         |
| `mapb`                    | Get the previous page of locations     |
| `explore <location_name>` | Explore a location                     |
| `catch <pokemon>`         | Catch a pokemon                        |
| `inspect <pokemon>`       | Inspect a Pokemon you have caught      |
| `pokedex`                 | Show pokedex                           |
| `exit`                    | Exit the Pokedex                       |

Example session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
Exploring canalave-city-area...
Found Pokemon:
tentacool
...
Pokedex > catch tentacool
Throwing a Pokeball at tentacool...
tentacool was caught!
You may now inspect it with the inspect command.
Pokedex > inspect tentacool
Name: tentacool
Height: 9
...
```

Catching is random. A number is drawn below the Pokemon's base experience, and
the catch succeeds when that number is 40 or less. The chance of success
therefore falls as the base experience rises. A Pokemon with no base experience
cannot be caught.

The prompt prints the following errors and then continues:

- an unknown command (`Unknown command`)
- a missing argument
- `mapb` on the first page
- inspecting a Pokemon you have not caught
- a failed or malformed API response

## Library use

The pieces can be used on their own:

- `pokedex.cache.Cache(interval)` is a thread-safe byte cache.
  - `interval` is given in seconds or as a `timedelta`.
  - It has `add`, `get` (which returns `None` for a missing key), `reap`, `len()` and `in`.
  - A background thread drops stale entries.
  - `close()` stops that thread. The cache also works as a context manager.
- `pokedex.api.Client(timeout=5.0, cache_interval=timedelta(minutes=5), fetch=None)`
  is a PokeAPI client.
  - It has `list_locations(page_url=None)`, `list_pokemon(location)` and `get_pokemon(name)`.
  - These return `LocationPage`, `LocationArea` and `Pokemon` from `pokedex.models`.
  - Failures raise `pokedex.api.ApiError`.
  - `fetch` can replace the HTTP transport with any callable that takes a URL and a timeout and returns bytes.
  - The client works as a context manager.
- `pokedex.commands` holds each command function, `Config` (the session state)
  and `get_commands()`.
- `pokedex.repl.clean_input` is the input normaliser the prompt uses.
  `pokedex.repl.start_repl(cfg, stream)` runs the prompt over any text stream.

## Limitations

Caught Pokemon are kept only for the current session. Nothing is saved to disk,
and the Pokedex starts empty each time.

## Running the tests

```
pip install ".[test]"
pytest
```