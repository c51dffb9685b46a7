# config.py

# Logging configuration
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(levelname)s - %(message)s"
}

# Range used by the "create a balanced tree" menu action
DEFAULT_RANGE = (1, 7)

# Printed between keys of a traversal
TRAVERSAL_SEPARATOR = " "
