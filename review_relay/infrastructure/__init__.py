# Infrastructure Layer
# ====================
# Contains all external service integrations:
# - llm/: Gemini sentiment classification
# - sms/: Twilio product owner notifications
# - persistence/: SQLite review store
# - config/: Environment and settings management
#
# This layer can be replaced entirely without affecting the application layer.
