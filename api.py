from __future__ import annotations

import logging
import secrets

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from explainer.config import Settings, get_settings
from explainer.report import explain


logger = logging.getLogger(__name__)

app = FastAPI(title="Code Explainer")


USAGE_PAGE = """<!DOCTYPE html>
<html>
	<head>
		<title>Code Explainer</title>
		<style>
			body { font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }
			h1 { color: #333; }
			pre { background: #f5f5f5; padding: 10px; border-radius: 5px; }
		</style>
	</head>
	<body>
		<h1>Code Explainer</h1>
		<p>This service analyzes and explains code.</p>
		<p>To use it, send a POST request with the following JSON body:</p>
		<pre>
{
	"method": "explainCode",
	"params": ["your code here", "programming language"]
}
		</pre>
		<p>Make sure to include the Authorization header with your shared secret.</p>
	</body>
</html>
"""


def _authorized(request: Request, settings: Settings) -> bool:
	if not settings.shared_secret:
		return False
	header = request.headers.get("Authorization", "")
	return secrets.compare_digest(header.encode(), f"Bearer {settings.shared_secret}".encode())


@app.get("/", response_class=HTMLResponse)
def usage() -> HTMLResponse:
	return HTMLResponse(USAGE_PAGE)


@app.post("/")
async def explain_code(request: Request, settings: Settings = Depends(get_settings)) -> Response:
	if not _authorized(request, settings):
		logger.warning("Rejected request from %s: bad or missing token", request.client.host if request.client else "?")
		return PlainTextResponse("Unauthorized", status_code=401)

	try:
		body = await request.json()
		params = body.get("params") if isinstance(body, dict) else None
		if (
			not isinstance(body, dict)
			or body.get("method") != "explainCode"
			or not isinstance(params, list)
			or len(params) < 2
			or not isinstance(params[0], str)
			or not isinstance(params[1], str)
		):
			return PlainTextResponse("Invalid method or parameters", status_code=400)

		result = explain(params[0], params[1])
		return JSONResponse({"result": result})
	except Exception as e:
		logger.exception("Failed to process explainCode request")
		return PlainTextResponse(f"Error processing request: {e}", status_code=500)


def create_app() -> FastAPI:
	return app
