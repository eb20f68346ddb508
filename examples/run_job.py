"""
Example: Running jobs in-process

The bridge is normally driven through STDIN/STDOUT:

    echo '{"params": {"prompt": "Say hi", "model": "openai/gpt-4o-mini"}}' | llm-bridge

The same pipeline can be awaited directly, which is handy from a larger
asyncio application. Set OPENAI_API_KEY (or AI_API_KEY) before running.
"""

import asyncio
import json

from llm_bridge import Settings, run_job
from llm_bridge.jobs import dump_envelope


async def example_plain_text():
    """A plain text answer comes back as {"text": ...}."""
    print("=== Plain text ===\n")

    raw = json.dumps({
        "params": {
            "prompt": "Write a haiku about pipes",
            "model": "openai/gpt-4o-mini",
            "temperature": 0.7,
            "max_tokens": 100,
        }
    })
    envelope = await run_job(raw)
    print(dump_envelope(envelope))


async def example_expect_json():
    """With expect_json the answer must contain a JSON value."""
    print("\n=== Expect JSON ===\n")

    raw = json.dumps({
        "params": {
            "prompt": "Return a JSON array with three prime numbers. No prose.",
            "model": "openai/gpt-4o-mini",
            "expect_json": True,
            "timeout_ms": 15000,
        }
    })
    envelope = await run_job(raw, settings=Settings(log_level="INFO"))
    print(dump_envelope(envelope))


async def example_local_server():
    """A keyless OpenAI-compatible server (e.g. Ollama) needs only base_url."""
    print("\n=== Local server ===\n")

    raw = json.dumps({
        "params": {
            "prompt": "Say hello",
            "model": "local/llama3.2",
            "base_url": "http://localhost:11434/v1",
            "stop_sequences": "\n\n",
        }
    })
    envelope = await run_job(raw)
    print(dump_envelope(envelope))


async def main():
    await example_plain_text()
    await example_expect_json()
    await example_local_server()


if __name__ == "__main__":
    asyncio.run(main())
