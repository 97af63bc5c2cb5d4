import logging

import uvicorn

from larder.api.api_run import create_app
from larder.utilities.config import load_settings
from larder.utilities.network import get_local_ip

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def run():
    settings = load_settings()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO), format=LOG_FORMAT)
    app = create_app(settings)

    port = settings.port
    local_ip = get_local_ip()
    logging.getLogger("larder_app").info("Starting server at http://localhost:%s", port)
    # Also show the LAN-accessible URL for other devices on the same network
    if settings.app_host in ("0.0.0.0", "") and local_ip not in ("127.0.0.1", "localhost"):
        logging.getLogger("larder_app").info("Accessible from other devices at http://%s:%s", local_ip, port)
    uvicorn.run(app, host=settings.app_host, port=port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
