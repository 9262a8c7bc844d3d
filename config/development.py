import os

from config import env_list

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "employee_portal"),
}

# Names allowed to sign in (checked server-side)
AUTHORIZED_EMPLOYEES = env_list("AUTHORIZED_EMPLOYEES", "Brendan Abbott,Kyla Abbott")

# permissive | reject_negative | strict
MANUAL_ENTRY_POLICY = os.getenv("MANUAL_ENTRY_POLICY", "permissive")

PORT = int(os.getenv("PORT", "5001"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Install the standard daily task templates when default_tasks is empty
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
