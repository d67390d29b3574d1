import logging
import os
from dotenv import load_dotenv
from pathlib import Path

logger = logging.getLogger(__name__)

# First get the environment from ENV variable or default to 'development'
ENV = os.getenv('ENV', 'development')

# Get the base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# Load the appropriate .env file based on environment
def load_env_file():
    # First try to load .env.{ENV} file
    env_file = BASE_DIR / f".env.{ENV}"
    if env_file.exists():
        logger.info("Loading environment from %s", env_file)
        load_dotenv(dotenv_path=env_file, override=True)
        return True

    # Fallback to the standard .env file
    default_env_file = BASE_DIR / ".env"
    if default_env_file.exists():
        logger.info("Loading environment from %s", default_env_file)
        load_dotenv(dotenv_path=default_env_file, override=True)
        return True

    logger.info("No .env.%s or .env file found, using host environment variables", ENV)
    return False

# Load environment variables
env_file_loaded = load_env_file()


# Main
title=os.getenv("title_CAD", "CadOutSource API")
description=os.getenv("description_CAD", "Contact form and quote request handling for the CadOutSource website")
version=os.getenv("version_CAD", "1.0.0")

API_PREFIX=os.getenv('API_PREFIX', '/api')
HOST=os.getenv('HOST', '0.0.0.0')
PORT=int(os.getenv('PORT', '8000'))
LOG_LEVEL=os.getenv('LOG_LEVEL', 'INFO').upper()
DEBUG=os.getenv('DEBUG', 'false').lower() in ('true', '1', 'yes', 'on')

# Comma separated list of allowed frontend origins
CORS_ORIGINS=[
    origin.strip()
    for origin in os.getenv(
        'CORS_ORIGINS',
        'http://localhost:4321,http://127.0.0.1:4321,https://cadoutsource.co.uk',
    ).split(',')
    if origin.strip()
]

SITE_URL=os.getenv('SITE_URL', 'https://cadoutsource.co.uk')

# Resend transactional email
RESEND_API_KEY=os.getenv('RESEND_API_KEY')
RESEND_API_URL=os.getenv('RESEND_API_URL', 'https://api.resend.com')
RESEND_TIMEOUT=float(os.getenv('RESEND_TIMEOUT', '30'))

# Address that receives every contact form notification
OFFICIAL_EMAIL=os.getenv('OFFICIAL_EMAIL')
RESEND_FROM_EMAIL=os.getenv('RESEND_FROM_EMAIL') or OFFICIAL_EMAIL or 'onboarding@resend.dev'
BRAND_NAME=os.getenv('BRAND_NAME', 'CadOutSource')

# Shared with the frontend to gate the /thankyou page
THANKYOU_TOKEN=os.getenv('THANKYOU_TOKEN', '')
