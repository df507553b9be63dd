import logging
import logging.config


def setup_logger(config) -> logging.Logger:
    """Configure root logging from BotConfig; log directory is created on demand"""
    if config.log_to_file:
        config.log_dir.mkdir(exist_ok=True, parents=True)
    logging.config.dictConfig(config.get_logging_config())
    return logging.getLogger("mindfulspace")
