# main.py
from __future__ import annotations

import asyncio
from hypercorn.asyncio import serve
from hypercorn.config import Config as HyperConfig
from articleinsight import create_app
from articleinsight.config import ServiceConfigs


async def main():
    app = await create_app()
    service_configs = ServiceConfigs()

    cfg = HyperConfig()
    cfg.bind = [f"{service_configs.bind_host}:{service_configs.bind_port}"]

    await serve(app, cfg)


if __name__ == "__main__":
    asyncio.run(main())
