# Application Layer
# =================
# Use cases that orchestrate infrastructure services. No HTTP here:
# the web layer only parses requests and renders SubmissionError.

from .submit_review import ReviewSubmissionHandler, render_acknowledgment, parse_rating

__all__ = ["ReviewSubmissionHandler", "render_acknowledgment", "parse_rating"]
