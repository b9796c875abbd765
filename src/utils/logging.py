import logging

POSITION_LOGGER = "workflows.position_workflow"


class PositionLookupFilter(logging.Filter):
    """Drops LOOKUP-tagged chatter that lookup transports log above DEBUG under
    the position logger, unless the root level is DEBUG."""

    def filter(self, record: logging.LogRecord) -> bool:
        if logging.getLogger().getEffectiveLevel() <= logging.DEBUG:
            return True
        return not record.getMessage().startswith("LOOKUP:")


def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    lookup_filter = PositionLookupFilter()
    logger = logging.getLogger(POSITION_LOGGER)
    logger.addFilter(lookup_filter)
    yield lookup_filter
    logger.removeFilter(lookup_filter)
