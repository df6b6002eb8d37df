import logging
from typing import Optional

from daycare.core.config import settings


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once for the API process and the job/script entrypoints."""
    logging.basicConfig(level=(level or settings.log_level).upper(), format=LOG_FORMAT)
