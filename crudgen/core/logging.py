"""Console logging for generation runs.

Records may carry the entity being generated and the artifact kind being
written, passed through ``extra=``; both show as ``-`` when a record has none.
"""
import logging
import sys


class ContextFormatter(logging.Formatter):
    """Formatter for records with optional ``entity`` / ``artifact`` attributes."""
    def format(self, record):
        for attr in ("entity", "artifact"):
            if not hasattr(record, attr):
                setattr(record, attr, "-")
        return super().format(record)


def configure_logging(level: str = "INFO") -> None:
    """Send records to stdout at ``level``; unknown level names mean INFO."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ContextFormatter(
        "%(asctime)s %(levelname)s %(name)s [entity=%(entity)s artifact=%(artifact)s] - %(message)s"
    ))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
    )
