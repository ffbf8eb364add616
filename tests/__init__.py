import logging
import os


format = "%(asctime)s %(levelname)s %(name)s %(message)s"

if bool(os.environ.get("RFCURI_DEBUG")):  # pragma: no cover
    # Display every decision made while parsing.
    level = logging.DEBUG
else:
    # Hide rejections logged by tests of invalid URIs.
    level = logging.CRITICAL

logging.basicConfig(format=format, level=level)
