import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "deployment_db"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

MAX_DEPLOYMENTS_PER_SHIFT = int(os.getenv("MAX_DEPLOYMENTS_PER_SHIFT", "2"))
SALES_TOLERANCE = float(os.getenv("SALES_TOLERANCE", "0.01"))
