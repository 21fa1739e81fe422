import asyncio
import argparse
from environs import Env

from iss_flyover.logging_config import setup_logging
from iss_flyover.adapter import FlyoverTimesAPI
from iss_flyover.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
)
from iss_flyover.domain.exceptions import APIException


async def main():
    parser = argparse.ArgumentParser(description="ISS flyover times for your location")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the passes as JSON instead of plain text",
    )
    args = parser.parse_args()

    env = Env()
    env.read_env(".env")

    # Logging depends on env, so it comes after read_env
    setup_logging(env)

    api = FlyoverTimesAPI.create_from_env(env)

    try:
        passes = await api.next_passes()
    except APIException as e:
        print(f"API Error: {e}")
        return

    if args.json:
        print(JSONOutputFormatter().format_result(passes))
    else:
        ConsoleOutputFormatter().format_result(passes)


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
