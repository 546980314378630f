"""
Smoke test against a running server: simulates what Slack sends.

Run: python scripts/send_test_event.py [base_url]
"""
import asyncio
import sys
from pathlib import Path

import httpx

sys.path.insert(0, str(Path(__file__).parent.parent))

from autoresponder.core.config import settings


async def main(base_url: str):
    token = settings.SLACK_VERIFICATION_TOKEN or ""

    async with httpx.AsyncClient(base_url=base_url, timeout=10.0) as client:
        print("🧪 url_verification handshake")
        response = await client.post("/event", json={
            "token": token,
            "type": "url_verification",
            "challenge": "smoke-test",
        })
        print(f"   {response.status_code} {response.text}")

        # Slack sends slash commands as form data, not JSON
        print("🧪 slash command")
        response = await client.post("/command", data={
            "token": token,
            "command": "/autoreply",
            "text": "I'm away, back soon",
            "user_id": "USMOKETEST",
            "user_name": "smoke",
        })
        print(f"   {response.status_code} {response.text}")

        print("🧪 message event")
        response = await client.post("/event", json={
            "token": token,
            "type": "event_callback",
            "event_id": "EvSMOKETEST",
            "event": {
                "type": "message",
                "user": "USMOKETEST",
                "channel": "DSMOKETEST",
                "text": "ping",
            },
        })
        print(f"   {response.status_code} {response.text!r}")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "http://localhost:8080"))
