import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def configure_logging(app):
    """Attach a console handler to the package logger at the configured level."""
    logger = logging.getLogger('movie_api')
    logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    return logger
