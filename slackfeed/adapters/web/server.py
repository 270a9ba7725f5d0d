"""FastAPI application — feed routes and CORS."""

import sys
from dataclasses import replace
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, Response, StreamingResponse
from pydantic import BaseModel
from starlette.datastructures import Headers

from slackfeed.adapters.slack.client import SlackClient
from slackfeed.adapters.web.html_page import iter_page
from slackfeed.config import CONFIG
from slackfeed.domain.assembler import HTML_VIEW, JSON_VIEW, FeedView, assemble
from slackfeed.domain.models import RenderedItem
from slackfeed.ports.outbound import GatewayError

CORS_METHODS = ["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"]
READ_METHODS = ["GET", "HEAD"]


class NoContentCORSMiddleware(CORSMiddleware):
    """Answer successful preflight requests with 204 and no body."""

    def preflight_response(self, request_headers: Headers) -> Response:
        response = super().preflight_response(request_headers=request_headers)
        if response.status_code != 200:
            return response
        headers = {
            k: v
            for k, v in response.headers.items()
            if k not in ("content-length", "content-type")
        }
        return Response(status_code=204, headers=headers)


app = FastAPI(title="Slack Feed")
app.add_middleware(
    NoContentCORSMiddleware,
    allow_origins=["*"],
    allow_methods=CORS_METHODS,
    allow_headers=["*"],
)

slack_client = SlackClient()


class RenderedItemModel(BaseModel):
    profile_image: str
    display_name: str
    msg_html: str


def html_view() -> FeedView:
    return replace(HTML_VIEW, max_messages=CONFIG["html_max_messages"])


def json_view() -> FeedView:
    return replace(JSON_VIEW, max_messages=CONFIG["json_max_messages"])


async def load_feed(view: FeedView) -> List[RenderedItem]:
    """Fetch from Slack and render. Raises HTTPException on failure."""
    if not slack_client.is_configured:
        raise HTTPException(status_code=503, detail="Slack API not configured")
    try:
        messages, members = await slack_client.fetch_feed()
    except GatewayError as e:
        print(f"Error fetching Slack feed: {e}", file=sys.stderr)
        raise HTTPException(status_code=502, detail=str(e))
    return assemble(messages, members, view)


@app.api_route("/", methods=READ_METHODS, response_class=PlainTextResponse)
async def root():
    return "Nothing here"


@app.api_route("/html", methods=READ_METHODS)
@app.api_route("/list", methods=READ_METHODS)
async def feed_html():
    """Chat transcript, oldest message first"""
    items = await load_feed(html_view())
    return StreamingResponse(iter_page(items), media_type="text/html; charset=utf-8")


@app.api_route("/json", methods=READ_METHODS, response_model=List[RenderedItemModel])
async def feed_json():
    """Rendered feed, newest message first"""
    items = await load_feed(json_view())
    return [RenderedItemModel(**item.__dict__) for item in items]
