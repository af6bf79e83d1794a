"""Sample session: authorize, report a refuel, wait, then deauthorize."""

from __future__ import annotations

import argparse
import sys
import time

from fuelflux.client import DEFAULT_BASE_URL, Client, ClientConfig


def main(argv: list[str] | None = None) -> int:
    """Run the sample session and return the exit status."""
    parser = argparse.ArgumentParser(description="Run a sample pump session.")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL)
    parser.add_argument("--db-path", default="fuelflux_cache.db")
    args = parser.parse_args(argv)

    config = ClientConfig(base_url=args.base_url, db_path=args.db_path)
    with Client(config) as client:
        if not client.authorize("1111-1111", "2222-2222-2222-2222"):
            print("Authorization failed", file=sys.stderr)
            return 1

        client.report_refuel(1, 10.5)

        print("Queued/ sent refuel request.  Sleeping for 2s...")
        time.sleep(2)

        client.deauthorize()
    return 0


if __name__ == "__main__":
    sys.exit(main())