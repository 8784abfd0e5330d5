"""Print the chain tip and the hashes of the last few blocks.

Usage: python examples/chain_summary.py [count]
Connection settings come from ~/.ionrpc/config.json and IONRPC_* variables.
"""

import asyncio
import sys

from ionrpc import IonRpcClient, IonRpcError


async def main(count: int) -> int:
    client = IonRpcClient.from_config()
    try:
        height = (await client.getBlockCount())["result"]
        heights = range(max(0, height - count + 1), height + 1)
        replies = await client.batch(lambda rpc: [rpc.getBlockHash(h) for h in heights])
    except IonRpcError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"height {height}")
    for h, reply in zip(heights, replies):
        print(h, reply.get("result") or reply.get("error"))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(int(sys.argv[1]) if len(sys.argv) > 1 else 5)))
