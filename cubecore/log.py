import logging

LOGGER = logging.getLogger("cubecore")
