#!/usr/bin/env python3
"""
Client usage examples for transmission-client.

Demonstrates connecting to a Transmission daemon, adding a magnet link,
listing torrents and handling daemon errors.
"""

import asyncio
import os

from transmission_client import (
    RECENTLY_ACTIVE,
    AddTorrentArgs,
    GetTorrentArgs,
    RPCError,
    TransmissionClient,
    TransportError,
)


async def basic_usage():
    """Show the daemon version and the torrents it manages."""
    print("=== Basic Usage ===")

    async with TransmissionClient(
        os.getenv("TRANSMISSION_URL", "http://localhost:9091"),
        username=os.getenv("TRANSMISSION_USERNAME"),
        password=os.getenv("TRANSMISSION_PASSWORD"),
    ) as client:
        try:
            session = await client.get_session()
            print(f"Connected to Transmission {session['version']}")

            result = await client.get_torrents(
                GetTorrentArgs(fields=["id", "name", "percentDone"])
            )
            for torrent in result.get("torrents", []):
                print(f"  [{torrent['id']}] {torrent['name']} {torrent['percentDone']:.0%}")

        except TransportError as e:
            print(f"Could not reach daemon: {e}")


async def add_magnet(magnet: str, download_dir: str):
    """Add a magnet link and start it paused."""
    print("\n=== Add Magnet ===")

    async with TransmissionClient.from_settings() as client:
        try:
            result = await client.add_torrent(
                AddTorrentArgs(filename=magnet, paused=True, download_dir=download_dir)
            )
            added = result.get("torrentAdded") or result.get("torrentDuplicate")
            print(f"Torrent {added['hashString']} queued as #{added['id']}")

            await client.start_torrents([added["id"]])

        except RPCError as e:
            print(f"Daemon rejected torrent (code {e.code}): {e}")


async def poll_recent():
    """Fetch only torrents that changed since the previous poll."""
    print("\n=== Recently Active ===")

    async with TransmissionClient.from_settings() as client:
        result = await client.get_torrents(
            GetTorrentArgs(ids=RECENTLY_ACTIVE, fields=["id", "status"])
        )
        print(f"{len(result.get('torrents', []))} changed, {len(result.get('removed', []))} removed")


async def main():
    await basic_usage()
    await add_magnet(
        "magnet:?xt=urn:btih:08ada5a7a6183aae1e09d831df6748d566095a10&dn=Sintel",
        "/downloads",
    )
    await poll_recent()


if __name__ == "__main__":
    asyncio.run(main())
