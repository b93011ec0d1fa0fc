"""Basic usage examples for the f1ergast client and the race aggregator."""

import asyncio

from f1ergast import AsyncErgastClient
from raceglobe.enrichment import RaceAggregator


async def main() -> None:
    async with AsyncErgastClient() as ergast:
        # Latest few championship seasons
        print("=== Seasons ===")
        seasons = await ergast.seasons()
        for s in seasons[-5:]:
            print(f"  {s.season}")

        # 2023 calendar with circuit locations
        print("\n=== 2023 Calendar ===")
        races = await ergast.races(2023)
        for race in races[:5]:
            loc = race.circuit.location if race.circuit else None
            where = f"{loc.locality}, {loc.country}" if loc else "unknown"
            print(f"  R{race.round} {race.race_name} - {where}")

        if not races:
            print("  No races found.")
            return

        # Pole and winner of the opener
        first = races[0]
        quali = await ergast.qualifying(2023, first.round)
        results = await ergast.results(2023, first.round)
        print(f"\n=== {first.race_name} ===")
        print(f"  Pole:   {quali[0].pole_sitter if quali else 'Unknown'}")
        print(f"  Winner: {results[0].winner if results else 'Unknown'}")

        # Same data as the aggregator's enriched route
        print("\n=== 2023 Sprint Winners ===")
        aggregator = RaceAggregator(ergast, max_concurrency=4)
        table = await aggregator.sprint_races("2023")
        for race in table["RaceTable"]["Races"]:
            print(f"  {race['name']}: {race['winner']}")


if __name__ == "__main__":
    asyncio.run(main())
