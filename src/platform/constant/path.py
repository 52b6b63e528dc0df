from pathlib import Path


# Repository root (holds alembic.ini and the .env files)
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

LOG_DIR = BASE_DIR / 'logs'

ENV_FILE = BASE_DIR / '.env'
ENV_EXAMPLE_FILE = BASE_DIR / '.env.example'
