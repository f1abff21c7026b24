"""Run the cache checks against a live API server and print a summary."""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from api_server_harness import ApiServerHarnessError, SessionClient, load_config
from api_server_harness.scenarios import CACHE_CHECKS, setup_session, teardown_session


async def main() -> int:
    """Set up one session, run every cache check on it, then end it."""
    config = load_config()
    if not config.is_configured:
        print("✗ API_SERVER_BASE_URL is not set")
        return 2

    print(f"Running cache checks against {config.base_url}...")
    failures = 0

    async with SessionClient(config) as client:
        try:
            ctx = await setup_session(client, config)
        except ApiServerHarnessError as e:
            print(f"✗ Setup failed: {e.message}")
            return 1

        print(f"✓ Session {ctx.session.session_id} ready")
        try:
            for name, check in CACHE_CHECKS.items():
                try:
                    await check(ctx)
                    print(f"✓ {name}")
                except AssertionError as e:
                    failures += 1
                    print(f"✗ {name}\n{e}")
        finally:
            await teardown_session(ctx)

    print(f"\n{len(CACHE_CHECKS) - failures}/{len(CACHE_CHECKS)} checks passed")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
