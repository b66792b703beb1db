"""
The main package for the scooter rental service.
"""

import logging

from scooters.config import scooters_mode

logger = logging.getLogger(__name__)
handler = logging.StreamHandler()
formatter = logging.Formatter('%(asctime)s %(name)-12s %(levelname)-8s %(message)s')
handler.setFormatter(formatter)
logger.addHandler(handler)
logger.setLevel(logging.DEBUG if scooters_mode == "development" else logging.INFO)
