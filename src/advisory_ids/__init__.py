import logging

TRACE = 5

logging.addLevelName(TRACE, "TRACE")


def _logger_trace(self: logging.Logger, msg, *args, **kwargs) -> None:
    if self.isEnabledFor(TRACE):
        self._log(TRACE, msg, args, **kwargs)


def _trace(msg, *args, **kwargs) -> None:
    logging.log(TRACE, msg, *args, **kwargs)


logging.Logger.trace = _logger_trace
logging.trace = _trace
