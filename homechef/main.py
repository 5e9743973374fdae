import logging

import uvicorn
from homechef.api.api_run import app
from homechef.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from homechef.utilities.network import server_urls


if __name__ == "__main__":
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    local_url, *lan_urls = server_urls(APP_HOST, APP_PORT)
    print(f"Uvicorn running on {local_url} (Press CTRL+C to quit)")
    # Also show the LAN-accessible URL for other devices on the same network
    for url in lan_urls:
        print(f"Accessible from other devices at: {url}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
