"""Development entry point for the hand checker web service."""

from web.app import create_app
from web.config import get_config, setup_logging

if __name__ == "__main__":
    config_class = get_config()
    setup_logging(config_class.LOG_LEVEL)
    app = create_app(config_class)

    print("Starting Poker Hand Checker...")
    print("API available at: http://localhost:5000/api")

    app.run(
        debug=config_class.DEBUG,
        host="0.0.0.0",
        port=5000,
    )
