import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Only the first MAX_ROWS data rows of an upload are kept
MAX_ROWS = int(os.getenv("MAX_ROWS", "20"))
PREVIEW_ROWS = int(os.getenv("PREVIEW_ROWS", "5"))
CSV_DELIMITER = os.getenv("CSV_DELIMITER", ",")

# Uploads larger than this are rejected before parsing
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(1024 * 1024)))

# Used by the Streamlit page to reach the API
API_BASE_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")
