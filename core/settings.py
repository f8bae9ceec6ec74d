import os

from dotenv import load_dotenv

load_dotenv()


def _csv(value: str):
    return [item.strip() for item in value.split(",") if item.strip()]


APP_TITLE = os.getenv("APP_TITLE", "Rehearsal Coach API")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ALLOW_ORIGINS = _csv(os.getenv("CORS_ALLOW_ORIGINS", "*"))

# Upper bound per side for the HTTP alignment endpoint; the DP table is n*m.
MAX_ALIGNMENT_TOKENS = int(os.getenv("MAX_ALIGNMENT_TOKENS", "2000"))

# The recorder taps one amplitude sample per 1024-frame buffer at 48 kHz.
TAP_BUFFER_FRAMES = 1024
TAP_SAMPLE_RATE = 48000

# Seconds between samples, used when a payload omits duration or its own interval.
SAMPLE_INTERVAL_SECONDS = float(os.getenv("SAMPLE_INTERVAL_SECONDS", TAP_BUFFER_FRAMES / TAP_SAMPLE_RATE))
MAX_RECORDING_SECONDS = 20.0
