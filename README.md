# fuelflux

A client for fuel pump controllers that talk to the FuelFlux API.

It authorizes a user at a pump controller, reports refuels and fuel
intakes, and keeps working when the network does not:

- **Cache** (`fuelflux.cache.Cache`): fuel tanks and users are held in
  memory and saved to a local SQLite database. A restarted controller
  therefore has data at once.
- **OfflineQueue** (`fuelflux.offline_queue.OfflineQueue`): reports that
  cannot be sent are queued in order as `QueueItem`s and retried later.
- **Background sync**: a daemon thread wakes every `cache_refresh`
  seconds. It checks the server's `/health` endpoint. If the server
  answers, the thread flushes the queue and refreshes the cached user
  list.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from fuelflux.client import Client, ClientConfig

with Client(ClientConfig(base_url="https://fuelflux.example.com:8087")) as client:
    if not client.authorize("controller-0001", "user-0001"):
        raise SystemExit("Authorization failed")

    # True if the server accepted it now, False if it was queued for later
    client.report_refuel(1, 10.5)
    client.report_fuel_intake(2, 500.0)

    client.deauthorize()
```

`ClientConfig` has three fields:

- `base_url`: defaults to `https://fuelflux.example.com:8087`.
- `db_path`: the path of the SQLite cache file. Defaults to `fuelflux_cache.db`.
- `cache_refresh`: the interval of the background refresh in seconds. Defaults to `60.0`.

`Client()` with no argument uses these defaults.

What each call does:

- `authorize`:
  - Stores the session token.
  - Caches the fuel tanks the server returns.
  - Caches the session user with its role and allowance.
  - Saves the cache.
  - On any failure it logs the error and returns `False`.
- `deauthorize`: ignores server errors and always drops the token.
- `report_refuel` and `report_fuel_intake`: first check `/health`, then post the report. If either step fails, the report is queued.

Leaving the `with` block, or calling `Client.close`, does three things:

- stops the background thread,
- saves and closes the cache,
- closes the HTTP session.

`Client.sync_users(first=0, number=100)` fetches a page of users by hand and
replaces the cached users with it. Errors are logged through the standard
`logging` module, not raised.

The cached data can be read and written through `Cache`:

```python
from fuelflux.cache import Cache
from fuelflux.models import FuelTankItem

with Cache("fuelflux_cache.db") as cache:
    cache.update_fuel_tanks([FuelTankItem(number=1, volume=1000.0)])
    print(cache.fuel_tanks())
    print(cache.user("user-0001"))  # a UserItem, or None
```

`Cache.save` writes the in-memory state in one transaction, and
`Cache.load` reloads it from the file. `close` saves before closing.

`fuelflux.http_client.HttpClient` is the low-level layer. It sends JSON and
returns parsed JSON:

- Transport failures are raised as `HttpError`.
- A reply that is not JSON raises `ValueError`.
- An empty reply to a GET gives `{}`.
- HTTP status codes are not checked.

## Example command

```
fuelflux-example [--base-url URL] [--db-path PATH]
```

The command runs a sample session:

1. Authorizes a fixed sample controller and user at the server.
2. Reports one refuel of 10.5 from tank 1.
3. Waits two seconds.
4. Deauthorizes.

It exits with status 1 if authorization fails, otherwise 0.

## Limitations

- The offline queue lives in memory only. Queued reports are lost when the
  process exits.
- `Client.sync_fuel_tanks` does nothing, because the server API offers no
  tank listing. Fuel tanks reach the cache only through `authorize`.