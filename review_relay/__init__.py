# Review Relay - Product Review Intake with Sentiment and SMS Alerts
# ==================================================================
# Collects product reviews from a web form, classifies their sentiment
# with Gemini, stores them in SQLite and texts the product owner.
#
# ARCHITECTURE LAYERS:
# - Presentation:   FastAPI routes and HTML rendering (web/)
# - Application:    The review submission pipeline (application/)
# - Infrastructure: External services (Gemini, Twilio, SQLite)

__version__ = "0.1.0"
