"""
Seed Haven - Centralized Configuration
=======================================
All environment variables and constants are loaded here.
No other module should call os.getenv() directly.
"""

import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()


# ==========================================
# 🗄️ Storage
# ==========================================
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./seedhaven.db")

# Every persisted key is namespaced with this prefix: <prefix>_users, <prefix>_cart_<id>
STORAGE_PREFIX = os.getenv("STORAGE_PREFIX", "seedhaven")


# ==========================================
# 🔐 Security
# ==========================================
PASSWORD_SECRET = os.getenv("PASSWORD_SECRET", "seedhaven-dev-secret")


# ==========================================
# ✉️ Order Confirmation (Gemini)
# ==========================================
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_API_URL = os.getenv(
    "GEMINI_API_URL",
    "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent",
)
SUMMARY_TIMEOUT = float(os.getenv("SUMMARY_TIMEOUT", "20"))


# ==========================================
# 🛒 Checkout
# ==========================================
SHIPPING_FEE = Decimal("5.00")
TAX_RATE = Decimal("0.08")


# ==========================================
# 🌱 Custom Pack Composer
# ==========================================
CUSTOM_PACK_MIN = 0
CUSTOM_PACK_MAX = 50
CUSTOM_PACK_DEFAULT = 10

# Used when the catalog has no white/black product to price against
FALLBACK_WHITE_PRICE = Decimal("1.50")
FALLBACK_BLACK_PRICE = Decimal("1.75")


# ==========================================
# 🔧 App
# ==========================================
STORE_NAME = "Seed Haven"
DEBUG = os.getenv("DEBUG", "false").lower() == "true"
