import logging

import uvicorn
from nutrirenal.api.api_run import app
from nutrirenal.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL
from nutrirenal.utilities.network import lan_address, service_urls


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    local_url, *lan_urls = service_urls(APP_PORT, lan_address())
    print(f"Uvicorn running on {local_url} (Press CTRL+C to quit)")
    for url in lan_urls:
        print(f"Accessible from other devices at: {url}")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
