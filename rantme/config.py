import os

from dotenv import load_dotenv

load_dotenv()

APP_TITLE = "RantMe"
GREETING = "Greetings! How can I help you today?"
REPLY_FALLBACK = "Sorry, I'm having trouble right now."

TONES = ["empathetic", "motivational", "reflective", "funny"]
DEFAULT_TONE = "empathetic"

CHECKLIST_ITEMS = [
    "Drink some water",
    "Take a short walk",
    "Stretch for a minute",
    "Message someone you trust",
    "Take three slow breaths",
]


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# ---- Remote collaborators ----
OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY", "")
OPENROUTER_URL = os.getenv("OPENROUTER_URL") or "https://openrouter.ai/api/v1/chat/completions"
CHAT_MODEL = os.getenv("CHAT_MODEL") or "mistralai/mistral-7b-instruct:free"

HUGGINGFACE_API_KEY = os.getenv("HUGGINGFACE_API_KEY", "")
EMOTION_API_URL = (
    os.getenv("EMOTION_API_URL")
    or "https://api-inference.huggingface.co/models/j-hartmann/emotion-english-distilroberta-base"
)

HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT") or 30)

# ---- Mood engine switches ----
MOOD_SOURCE = (os.getenv("MOOD_SOURCE") or "remote").lower()       # "remote" | "local"
MOOD_SCORE_MODE = (os.getenv("MOOD_SCORE_MODE") or "average").lower()  # "average" | "sum"
if MOOD_SCORE_MODE not in ("average", "sum"):
    raise ValueError(f"MOOD_SCORE_MODE must be 'average' or 'sum', got {MOOD_SCORE_MODE!r}")
MOOD_INCLUDE_DEPRESSED = _flag("MOOD_INCLUDE_DEPRESSED", False)
CASCADE_MOOD_DELETE = _flag("CASCADE_MOOD_DELETE", False)
