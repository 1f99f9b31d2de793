# dictidx/paths.py

import os

# --- Base data paths ---
DATA_DIR = os.getenv("DICTIDX_DATA_DIR", "data")

# --- Default dictionary index (StarDict .idx, optionally gzipped) ---
IDX_PATH = os.path.join(DATA_DIR, "dictionary.idx")

# --- Files with this suffix are gunzipped before decoding ---
GZ_SUFFIX = ".gz"
