import logging


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, log_level=logging.INFO) -> logging.Logger:
    """
    Named logger with a single stream handler, same setup the trainers and
    evaluators used to repeat inline. Calling it twice for the same name
    only updates the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
