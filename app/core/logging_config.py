import logging
import sys

def setup_logging():
    """
    Configure logging for the application.

    Sets up logging to stdout so container platforms can collect it.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    # Reduce SQLAlchemy noise in logs
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("googlemaps").setLevel(logging.WARNING)

    return logging.getLogger("touchline")


# Create global logger instance
logger = setup_logging()
