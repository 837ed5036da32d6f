"""WSGI entry point for production deployment."""

from web.app import create_app
from web.config import get_config, setup_logging

config_class = get_config("production")
setup_logging(config_class.LOG_LEVEL)
app = create_app(config_class)
