# --- File: config.py ---
import os
from dotenv import load_dotenv
import logging

load_dotenv()

LOG_LEVEL_FROM_ENV = os.getenv("LOG_LEVEL", "INFO").upper()
numeric_level = getattr(logging, LOG_LEVEL_FROM_ENV, logging.INFO)

logging.basicConfig(
    level=numeric_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# --- Recipient RSA key pair (PEM, provided out-of-band) ---
# Inline PEM wins over the *_FILE variants. Literal "\n" sequences are accepted.
PUBLIC_KEY = os.getenv("PUBLIC_KEY")
PRIVATE_KEY = os.getenv("PRIVATE_KEY")
PUBLIC_KEY_FILE = os.getenv("PUBLIC_KEY_FILE")
PRIVATE_KEY_FILE = os.getenv("PRIVATE_KEY_FILE")
MIN_RSA_KEY_BITS = int(os.getenv("MIN_RSA_KEY_BITS", "2048"))

# --- API Settings ---
API_PREFIX = os.getenv("API_PREFIX", "/api")
API_TITLE = os.getenv("API_TITLE", "Ecommerce Encryption API")
API_VERSION = os.getenv("API_VERSION", "v1")
API_DESCRIPTION = os.getenv("API_DESCRIPTION", "Hybrid RSA + AES-256-GCM message encryption for the e-commerce backend.")
CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000").split(",")

# --- Server Settings ---
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
RELOAD = os.getenv("RELOAD", "false").lower() == "true"


# --- Basic Validation ---
if not (PUBLIC_KEY or PUBLIC_KEY_FILE):
    logger.warning("PUBLIC_KEY (or PUBLIC_KEY_FILE) not set. Encryption requests will fail.")
if not (PRIVATE_KEY or PRIVATE_KEY_FILE):
    logger.warning("PRIVATE_KEY (or PRIVATE_KEY_FILE) not set. Decryption requests will fail.")
