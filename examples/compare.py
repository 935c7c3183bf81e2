import asyncio

import doublehmac


async def main():
    print("same:", await doublehmac.compare_timing_safe("testString1", "testString1"))
    print("different:", await doublehmac.compare_timing_safe("abc", "abd"))

    key = await doublehmac.generate_secret_key(algorithm="SHA-512")
    print("digest:", await doublehmac.compute_hmac(key, "hello"))


asyncio.run(main())
