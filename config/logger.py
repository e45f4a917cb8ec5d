"""
Logging configuration for the Daily Good Vibes newsletter.
Sets up logging with file and console output and warns about missing service keys.
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv

# Project .env first, then config/.env for anything it leaves unset
load_dotenv()
load_dotenv(dotenv_path=Path(__file__).parent / '.env')

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_DIR = Path(os.getenv('LOG_DIR', Path(__file__).parent.parent / 'logs'))
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# (required variables, consequence when any is missing)
REQUIRED_SETTINGS = [
    (('OPENAI_API_KEY',), "AI news will use fallback content."),
    (('SENDGRID_API_KEY',), "Newsletter distribution will fail."),
    (('SUPABASE_URL',), "Subscriber lookups will fail."),
]

def warn_missing_settings():
    """Log one warning per service whose configuration is incomplete."""
    for names, consequence in REQUIRED_SETTINGS:
        missing = [name for name in names if not os.getenv(name)]
        if missing:
            logging.warning(f"{', '.join(missing)} not set. {consequence}")

    if not (os.getenv('SUPABASE_SERVICE_KEY') or os.getenv('SUPABASE_ANON_KEY')):
        logging.warning("No subscriber database key set. Subscriber lookups will fail.")

def setup_logging():
    """Set up logging configuration."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_level = getattr(logging, LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(LOG_DIR / 'daily_good_vibes.log', encoding='utf-8'),
            logging.StreamHandler()
        ]
    )
    warn_missing_settings()
    return logging.getLogger('daily_good_vibes')

# Create logger instance
logger = setup_logging()
