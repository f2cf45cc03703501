"""Allow `python -m scripts` to run the reference data seed."""

import asyncio

from scripts.seed import _run_seed

asyncio.run(_run_seed())
