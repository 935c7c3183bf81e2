#!/usr/bin/env python3
"""Time double HMAC comparison against ``hmac.compare_digest``.

Usage: benchmark.py [runs]
       benchmark.py --leak [runs]

``--leak`` instead times a plain ``==`` of a one-character secret against
every lowercase letter; the matching letter is usually the slowest.
"""
import asyncio
import hmac
import string
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import doublehmac  # noqa: E402

args = sys.argv[1:]
leak = "--leak" in args
args = [a for a in args if a != "--leak"]
runs = int(args[0]) if args else (1000 if leak else 10000)


def timing_leak(runs: int) -> None:
    secret = "m"
    timings = {c: 0.0 for c in string.ascii_lowercase}
    for _ in range(runs):
        for c in string.ascii_lowercase:
            start = time.perf_counter()
            _ = c == secret
            timings[c] += time.perf_counter() - start
    for c in timings:
        timings[c] /= runs
    slowest = max(timings, key=timings.get)
    for c, t in timings.items():
        marker = "  <- slowest" if c == slowest else ""
        print(f"{c}: {t * 1e9:.1f} ns{marker}")


async def compare_methods(runs: int) -> None:
    a = b"testString1"
    b = b"testString1"
    key = await doublehmac.generate_secret_key()

    async def native():
        hmac.compare_digest(a, b)

    async def fresh_key():
        await doublehmac.compare_timing_safe(a, b)

    async def shared_key():
        await doublehmac.compare_timing_safe(a, b, secret_key=key, hmac_algorithm="SHA-256")

    methods = [
        ("hmac.compare_digest", native),
        ("compare_timing_safe", fresh_key),
        ("compare_timing_safe (pre-generated key)", shared_key),
    ]
    results = {name: 0.0 for name, _ in methods}
    for _ in range(runs):
        for name, func in methods:
            start = time.perf_counter()
            await func()
            results[name] += time.perf_counter() - start
        # rotate so no method always runs first
        methods.append(methods.pop(0))

    for name in results:
        results[name] /= runs
        print(f"{name}: {results[name] * 1e6:.2f} us")

    fastest = min(results.values())
    for name, t in results.items():
        print(f"{name} is {t / fastest:.2f} times slower than the fastest method.")


if leak:
    timing_leak(runs)
else:
    print(f"provider: {doublehmac.default_provider().name}, runs: {runs}")
    asyncio.run(compare_methods(runs))
