"""Print stream files and recorders of the configured Wowza application"""
import asyncio
import json
import sys

from wowza_rest import WowzaAPIClient, WowzaAPIError, get_settings
from wowza_rest.core.logging_config import configure_logging


async def main() -> int:
    settings = get_settings()
    configure_logging(settings.WOWZA_DEBUG)
    wowza = WowzaAPIClient.from_settings(settings)

    try:
        stream_files, recorders = await asyncio.gather(
            wowza.list_stream_files(),
            wowza.list_recorders(),
        )
    except WowzaAPIError as e:
        print(f"Wowza request failed: {e}", file=sys.stderr)
        return 1

    print(f"Server: {wowza.base_url}")
    print("Stream files:")
    print(json.dumps(stream_files, indent=2))
    print("Recorders:")
    print(json.dumps(recorders, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
