"""
Domain constants - language codes, probe text and translation limits.
Centralized here for easy modification.
"""

# Language codes
ENGLISH = "en"
AMHARIC = "am"

# Canary text used by the health probe (always translated from English)
PROBE_TEXT = "Hello"

# Key the selected language is persisted under
LANGUAGE_STORAGE_KEY = "preferredLanguage"

# Batches larger than this go through POST /translate/batch,
# smaller ones are translated one by one to maximize cache reuse
BATCH_THRESHOLD = 5

# Per-attempt timeout for public translation mirrors (seconds)
EXTERNAL_TIMEOUT = 10.0
