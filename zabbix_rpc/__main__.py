"""
Connectivity check: python -m zabbix_rpc

Reads ZABBIX_* from the environment, logs in if a user is set and
logs the API version.
"""
import logging
import sys

from .api import API
from .config import Config
from .errors import ZabbixError
from .log import get_logger, setup_logging

logger = get_logger("zabbix_rpc")


def main() -> int:
    setup_logging(logging.INFO)
    config = Config.from_env()
    api = API(config)

    try:
        logger.info("Zabbix API %s at %s", api.version(), config.url)
        if config.user and not config.token:
            api.login(config.user, config.password or "")
            api.logout()
    except ZabbixError as e:
        logger.error("Zabbix check FAILED: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
