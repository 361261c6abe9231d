"""
FastAPI Web Application - Review Relay
=======================================

Serves the review form and accepts submissions. The pipeline itself lives
in review_relay.application; this module only parses requests, runs the
handler in the thread pool and turns SubmissionError into a plain-text
error response.
"""

import logging
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from review_relay.application.submit_review import (
    FORM_PARSE_ERROR,
    ReviewSubmissionHandler,
)
from review_relay.exceptions import ConfigurationError, SubmissionError
from review_relay.infrastructure.config import Settings, get_settings
from review_relay.infrastructure.llm import SentimentService
from review_relay.infrastructure.persistence import Database
from review_relay.infrastructure.sms import NotificationDispatcher

logger = logging.getLogger(__name__)


# ── Wiring ─────────────────────────────────────────────────────────

def build_handler(settings: Settings) -> ReviewSubmissionHandler:
    """
    Create the shared handler from settings.

    Raises:
        ConfigurationError: if a required setting is missing.
    """
    issues = settings.validate()
    for issue in issues:
        logger.warning(issue)

    errors = [issue for issue in issues if issue.startswith("ERROR:")]
    if errors:
        raise ConfigurationError("; ".join(errors))

    db = Database(settings.database_file)
    db.init()
    logger.info("Database ready")

    return ReviewSubmissionHandler(
        classifier=SentimentService(settings.llm),
        store=db,
        dispatcher=NotificationDispatcher.from_settings(settings.sms),
    )


def get_handler(request: Request) -> ReviewSubmissionHandler:
    return request.app.state.handler


# ══════════════════════════════════════════════════════════════════
#  HTML TEMPLATE RENDERERS
# ══════════════════════════════════════════════════════════════════

SHARED_CSS = """
    :root {
        --bg-dark: #0a0a14;
        --bg-card: rgba(255,255,255,0.035);
        --border: rgba(255,255,255,0.07);
        --text: #e2e8f0;
        --text-muted: #64748b;
        --accent-1: #7c3aed;
        --accent-2: #06b6d4;
        --gradient: linear-gradient(135deg, #7c3aed 0%, #06b6d4 100%);
    }

    * { margin: 0; padding: 0; box-sizing: border-box; }

    body {
        font-family: 'Inter', -apple-system, BlinkMacSystemFont, sans-serif;
        background: var(--bg-dark);
        min-height: 100vh;
        color: var(--text);
        display: flex; justify-content: center; align-items: center; padding: 20px;
    }

    .card {
        width: 100%; max-width: 480px;
        background: var(--bg-card);
        border: 1px solid var(--border);
        border-radius: 16px;
        padding: 40px 36px;
    }

    h1 {
        font-size: 28px; font-weight: 800; text-align: center; margin-bottom: 24px;
        background: var(--gradient);
        -webkit-background-clip: text; -webkit-text-fill-color: transparent;
    }

    .form-group { margin-bottom: 16px; }
    .form-group label {
        display: block; font-size: 12px; color: var(--text-muted); margin-bottom: 6px;
        font-weight: 500; text-transform: uppercase; letter-spacing: 0.5px;
    }

    input[type="text"], select, textarea {
        background: rgba(255,255,255,0.05);
        border: 1px solid var(--border);
        padding: 12px 16px;
        border-radius: 10px;
        color: var(--text);
        font-size: 14px;
        font-family: inherit;
        width: 100%;
    }
    textarea { min-height: 120px; resize: vertical; }
    input:focus, select:focus, textarea:focus { outline: none; border-color: var(--accent-1); }

    .btn {
        width: 100%;
        background: var(--gradient);
        color: #fff;
        border: none;
        padding: 14px;
        border-radius: 10px;
        font-weight: 600;
        font-size: 14px;
        cursor: pointer;
        margin-top: 8px;
    }

    .sentiment-message { text-align: center; margin-top: 24px; }
    .sentiment-message p { margin-bottom: 12px; }
    a { color: var(--accent-2); text-decoration: none; }
"""


def render_review_form() -> str:
    rating_options = "\n".join(
        f'                    <option value="{n}">{n} star{"s" if n > 1 else ""}</option>'
        for n in range(5, 0, -1)
    )
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Leave a Review</title>
    <script src="https://unpkg.com/htmx.org@1.9.12"></script>
    <style>
        {SHARED_CSS}
    </style>
</head>
<body>
    <div class="card">
        <h1>Leave a Review</h1>
        <form method="post" action="/submit-review" hx-post="/submit-review" hx-target="#result" hx-swap="innerHTML">
            <div class="form-group">
                <label for="review_name">Your Name</label>
                <input type="text" id="review_name" name="review_name" required>
            </div>
            <div class="form-group">
                <label for="rating">Rating</label>
                <select id="rating" name="rating" required>
{rating_options}
                </select>
            </div>
            <div class="form-group">
                <label for="review_description">Your Review</label>
                <textarea id="review_description" name="review_description" required></textarea>
            </div>
            <button type="submit" class="btn">Submit Review</button>
        </form>
        <div id="result"></div>
    </div>
</body>
</html>"""


# ── Routes ─────────────────────────────────────────────────────────

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def review_form():
    return render_review_form()


@router.api_route("/submit-review", methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
async def submit_review(request: Request, handler: ReviewSubmissionHandler = Depends(get_handler)):
    try:
        handler.check_method(request.method)

        try:
            form = await request.form()
        except Exception as e:
            logger.warning(f"Error parsing form: {e}")
            raise SubmissionError(400, FORM_PARSE_ERROR) from e

        html = await run_in_threadpool(handler.submit, form)
    except SubmissionError as e:
        return PlainTextResponse(e.message, status_code=e.status_code)

    return HTMLResponse(html)


# ── App factory ────────────────────────────────────────────────────

def create_app(handler: Optional[ReviewSubmissionHandler] = None) -> FastAPI:
    """
    Build the FastAPI app.

    Without an explicit handler, one is built from settings at startup;
    a missing GEMINI_API_KEY then aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.handler is None:
            app.state.handler = build_handler(get_settings())
        yield

    app = FastAPI(
        title="Review Relay",
        description="Product review intake with sentiment analysis and SMS alerts",
        lifespan=lifespan,
    )
    app.state.handler = handler
    app.include_router(router)
    return app


app = create_app()
